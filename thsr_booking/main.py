import argparse
import logging
import os
import sys
from typing import List, Optional

import requests

from thsr_booking.configs.common import LOG_LEVEL_ENV
from thsr_booking.controller.booking_flow import BookingFlow
from thsr_booking.controller.preset_flow import PresetFlow
from thsr_booking.errors import BookingError, ValidationRejected
from thsr_booking.remote.http_request import HTTPRequest
from thsr_booking.view.web.show_booking_result import ShowBookingResult
from thsr_booking.view.web.show_error_msg import ShowErrorMsg

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='thsr-booking', description='高鐵訂票小幫手')
    parser.add_argument('-p', '--preset', type=int, help='自動載入第 N 組預設（1 起算）')
    parser.add_argument('-v', '--verbose', action='store_true', help='顯示除錯訊息')
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False) -> None:
    level = 'DEBUG' if verbose else os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    print("=== 高鐵訂票小幫手 ===")

    try:
        preset_flow = PresetFlow(preset_number=args.preset)
        preset = preset_flow.run()

        with HTTPRequest() as client:
            flow = BookingFlow(client=client, preset=preset)
            summary = flow.run()
        ShowBookingResult().show(summary)
        print("\n請使用官方提供的管道完成後續付款以及取票!!")

        if preset is None:
            preset_flow.offer_save(flow.as_preset())
    except ValidationRejected as e:
        ShowErrorMsg().show(e.errors)
        return 1
    except (BookingError, ValueError, requests.RequestException, OSError) as e:
        logger.debug('booking aborted', exc_info=True)
        print(f'錯誤：{e}')
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
