from .loaders import FormatLoader, LoaderFactory, LoaderRegistry

__all__ = ["FormatLoader", "LoaderFactory", "LoaderRegistry"]
