from thsr_booking.configs.web.param_schema import ConfirmationSummary
from thsr_booking.view.web.abstract_show import AbstractShow


class ShowBookingResult(AbstractShow):
    def show(self, summary: ConfirmationSummary) -> None:
        print('\n\n----------- 訂位結果 -----------')
        print(f'訂位代號：{summary.ticket_id}')
        print(f'總票價：{summary.total_price}')
        print('--------------------------------')
        print(f'{"日期":<10}{"起程":<6}{"到達":<6}{"出發":<8}{"抵達":<8}{"車次":<8}')
        print(
            f'{summary.date:<12}{summary.from_station:<8}{summary.to_station:<8}'
            f'{summary.depart_time:<10}{summary.arrive_time:<10}{summary.train_code:<8}'
        )
        for seat in summary.seat_labels:
            print(f'{summary.cabin_label} {seat}')
