from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class DocKind(Enum):
    MODULE = "Modules"
    STRUCT = "Structs"
    TYPE = "Types"
    TRAIT = "Traits"
    ENUM = "Enums"
    FUNCTION = "Functions"
    CONSTANT = "Constants"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value


class PageType(Enum):
    ALL = "all"
    INDEX = "index"


@dataclass(frozen=True)
class Listing:
    name: str
    url: str


@dataclass(frozen=True)
class ListingGroup:
    kind: DocKind
    listings: tuple

    def __post_init__(self):
        if not self.listings:
            raise ValueError(f"{self.kind.label} group has no listings")


class RawPage:
    def __init__(self, html: str, base: str, page_type=PageType.ALL):
        self.html = html
        self.base = base  # URL or filesystem path the page links are relative to
        self.page_type = page_type


class DocPage:
    def __init__(self, source: RawPage, groups):
        self.source = source
        self.groups = tuple(groups)

    @classmethod
    def from_source(cls, source: RawPage, parser):
        return cls(source, parser.parse(source))


class Parser(ABC):
    def __init__(self):
        self.verbose_callback = None

    def set_verbose_callback(self, callback):
        self.verbose_callback = callback

    def v_log(self, message):
        if self.verbose_callback:
            self.verbose_callback(message)

    @abstractmethod
    def parse(self, page: RawPage):
        pass
