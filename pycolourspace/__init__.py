# flake8: noqa
from ._logging import LogLevel, logger
from ._metadata import version
from .ansi import *
from .codec import *
from .convert import ROUTES, route
from .colourspace import *
from .compare import *
from .exception import *
from .polar import *
from .rgbspace import *
from .types import ColourModel
