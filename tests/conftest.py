import os
import sys

# helpers.py lives next to the tests
HERE = os.path.dirname(__file__)
if HERE not in sys.path:
    sys.path.insert(0, HERE)
