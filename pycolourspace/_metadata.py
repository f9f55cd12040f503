__version__ = '0.4.0'
version = __version__
