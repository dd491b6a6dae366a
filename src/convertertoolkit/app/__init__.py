"""Application bootstrap helpers."""

from importlib import import_module

__all__ = ["ConverterDemoLauncher"]


def __getattr__(name: str):
    if name == "ConverterDemoLauncher":
        module = import_module("convertertoolkit.app.launcher")
        value = module.ConverterDemoLauncher
    else:
        raise AttributeError(f"module 'convertertoolkit.app' has no attribute {name!r}")
    globals()[name] = value
    return value
