class ParseAvailTrain:
    def __init__(self) -> None:
        self.from_html = 'label.result-item'
        self.train_id = '#QueryCode'
        self.depart = '#QueryDeparture'
        self.arrival = '#QueryArrival'
        self.duration = '.duration > span:nth-of-type(2)'
        self.early_bird_discount = 'p.early-bird'
        self.college_student_discount = 'p.student'
        self.form_value = 'input[name="TrainQueryDataViewPanel:TrainGroup"]'
