# Import check modules in execution order.
# Each module registers its check when imported, so import order is run order.

from . import runtime
from . import cli_tool
from . import build_tool
from . import required_files
from . import build_script
from . import ci_env
