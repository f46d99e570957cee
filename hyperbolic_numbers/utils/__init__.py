"""Provide utility functions used by the various tools in this
package.

"""

from .types import *

from . import types, numerical, testing
