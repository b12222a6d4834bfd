import abc
from typing import Any, Union

from thsr_booking.errors import MalformedDocument
from thsr_booking.view_model.document import Element, parse_document


class AbstractViewModel(metaclass=abc.ABCMeta):
    def __init__(self) -> None:
        pass

    @abc.abstractmethod
    def parse(self, html: Union[bytes, str, Element]) -> Any:
        raise NotImplementedError

    def _parser(self, html: Union[bytes, str, Element]) -> Element:
        if isinstance(html, (bytes, str)):
            return parse_document(html)
        return html

    def _require(self, node: Element, selector: str) -> Element:
        """找不到元素時視為頁面結構變更"""
        found = node.select_one(selector)
        if found is None:
            raise MalformedDocument(f'{type(self).__name__}: 找不到元素 {selector!r}')
        return found

    def _require_attr(self, node: Element, name: str) -> str:
        value = node.attr(name)
        if value is None:
            raise MalformedDocument(f'{type(self).__name__}: 元素 {node!r} 缺少屬性 {name!r}')
        return value
