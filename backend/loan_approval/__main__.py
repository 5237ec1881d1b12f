import sys

from loan_approval.main import main

sys.exit(main())
