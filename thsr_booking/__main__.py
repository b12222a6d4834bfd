import sys

from thsr_booking.main import main

sys.exit(main())
