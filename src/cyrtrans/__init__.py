"""Cyrillic to Latin transliteration according to published schemas"""

# NOTE: The order is hierarchical; do not alphabetize!

from .misc import *  # noqa: F401, F403
from .rules import *  # noqa: F401, F403
from .schema import *  # noqa: F401, F403
from .engine import *  # noqa: F401, F403
from .schemas import *  # noqa: F401, F403

from .convenience import *  # noqa: F401, F403

from .version import version as __version__
