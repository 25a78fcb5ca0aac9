from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bpgen")
except PackageNotFoundError:
    __version__ = "unknown"

from bpgen.config import Config, Variant, load_config
from bpgen.exceptions import BoilerplateError, InvalidInputError
from bpgen.generators import GenerationResult, generate_component

__all__ = [
    "Config",
    "Variant",
    "load_config",
    "BoilerplateError",
    "InvalidInputError",
    "GenerationResult",
    "generate_component",
]
