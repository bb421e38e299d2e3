from dataclasses import dataclass, field


@dataclass
class ImageFile:
    filename: str
    extension: str
    order_key: int | float


@dataclass
class RenamePlanEntry:
    source_name: str
    temporary_name: str
    final_name: str


@dataclass
class ChangeRecord:
    old: str
    new: str


@dataclass
class StrandedFile:
    original_name: str
    temporary_name: str


@dataclass
class ReorderResult:
    message: str
    count: int
    changes: list[ChangeRecord] = field(default_factory=list)


@dataclass
class ImageEntry:
    filename: str
    url: str


@dataclass
class UploadResult:
    message: str
    filename: str
    url: str
