from .embed import *
from .message import *
