from pycollect.collection import EMPTY, Collection, c
from pycollect.main import init
from pycollect.reduced import Reduced, reduced

__all__ = ["EMPTY", "Collection", "Reduced", "c", "init", "reduced"]
