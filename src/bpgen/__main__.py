from bpgen.cli.main import bp

bp(prog_name="bpgen")
