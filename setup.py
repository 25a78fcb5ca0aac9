from setuptools import find_packages, setup

setup(
    name="bpgen",
    version="0.1.0",
    description="Scaffold React component and styles boilerplate from the command line.",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"bpgen": ["templates/*/*.j2"]},
    include_package_data=True,
    install_requires=[
        "jinja2>=3.1",
        "rich>=13.0",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": ["click>=8.0", "pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "bp=bpgen.cli.main:bp",
            "bp-scoped=bpgen.cli.main:bp_scoped",
        ],
    },
    zip_safe=False,
)
