import sys

from sudogen import cli

sys.exit(cli())
