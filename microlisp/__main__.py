import sys

from microlisp.main import main


sys.exit(main())
