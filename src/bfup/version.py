from importlib.metadata import PackageNotFoundError, version

try:
    version = version("bfup")
except PackageNotFoundError:
    version = "0.0.0"
