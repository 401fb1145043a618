"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .transcript import *
from .summary import *
from .tts import *
