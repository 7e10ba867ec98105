"""mddoc: combine a folder tree of markdown fragments into one document."""

from mddoc.combine import CombineResult, combine, combine_tree, read_header, rebuild_header
from mddoc.doc_dir import scan_doc_dir
from mddoc.document import MdDoc
from mddoc.exceptions import MdDocError, ReadError, ScanError, TitlePageError
from mddoc.headers import header_from_name
from mddoc.pagebreaks import BODY_CONTENT, PAGEBREAK, add_pagebreaks, ends_with_pagebreak
from mddoc.schemas import DocDir, Title
from mddoc.title_page import extract_title

__all__ = [
    "BODY_CONTENT",
    "CombineResult",
    "DocDir",
    "MdDoc",
    "MdDocError",
    "PAGEBREAK",
    "ReadError",
    "ScanError",
    "Title",
    "TitlePageError",
    "add_pagebreaks",
    "combine",
    "combine_tree",
    "ends_with_pagebreak",
    "extract_title",
    "header_from_name",
    "read_header",
    "rebuild_header",
    "scan_doc_dir",
]
