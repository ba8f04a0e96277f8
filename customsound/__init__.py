# This file marks the 'customsound' directory as a Python package.
# It allows us to import code from this directory using 'import customsound'.

# The version of our package.
# We use Semantic Versioning (Major.Minor.Patch).
__version__ = "0.1.0"
