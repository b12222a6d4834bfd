"""解析頁面所需的最小查詢介面

解析器只依賴 Element 介面（以選擇器查詢、讀取屬性、讀取文字），
預設實作以 BeautifulSoup 包裝。
"""
from typing import List, Optional, Protocol, Union

from bs4 import BeautifulSoup
from bs4.element import Tag


class Element(Protocol):
    def select(self, selector: str) -> List['Element']:
        ...

    def select_one(self, selector: str) -> Optional['Element']:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...

    def text(self) -> str:
        ...

    def next_sibling_element(self) -> Optional['Element']:
        ...


class SoupElement:
    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def select(self, selector: str) -> List['SoupElement']:
        return [SoupElement(tag) for tag in self.tag.select(selector)]

    def select_one(self, selector: str) -> Optional['SoupElement']:
        tag = self.tag.select_one(selector)
        return SoupElement(tag) if tag is not None else None

    def attr(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if isinstance(value, list):
            return ' '.join(value)
        return value

    def text(self) -> str:
        return self.tag.get_text(strip=True)

    def next_sibling_element(self) -> Optional['SoupElement']:
        tag = self.tag.find_next_sibling()
        return SoupElement(tag) if tag is not None else None

    def __repr__(self) -> str:
        return f'SoupElement({self.tag.name!r})'


def parse_document(html: Union[bytes, str]) -> SoupElement:
    return SoupElement(BeautifulSoup(html, features='html.parser'))
