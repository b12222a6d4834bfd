import abc
from typing import Any


class AbstractShow(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def show(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError
