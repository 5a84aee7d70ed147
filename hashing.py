#!/usr/bin/env python3

import sys
from libhashing import cli

if __name__ == '__main__':
	sys.exit(cli.main())
