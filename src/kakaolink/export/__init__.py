"""Export of extracted links to CSV, plain text, and JSON.

Public API:
    export_links(links, fmt) -> ExportFile
        Dispatches to export_csv / export_txt / export_json.
    import_json(content) -> list[ExtractedLink]
        Reads a JSON export back into records.
"""

from kakaolink.export.formats import (
    export_csv,
    export_filename,
    export_json,
    export_links,
    export_txt,
    import_json,
)
from kakaolink.export.share import build_share_text

__all__ = [
    "build_share_text",
    "export_csv",
    "export_filename",
    "export_json",
    "export_links",
    "export_txt",
    "import_json",
]
