"""Font resolution backed by reportlab's font registry."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Set, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from ..exceptions import FontResolutionError
from ..styles.text_style import Font

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf")

# The standard 14 PDF fonts ship with reportlab and never need a file.
STANDARD_FONTS = frozenset(pdfmetrics.standardFonts)


class FontResolver:
    """
    Resolves font face names to ``Font`` handles.

    Names already known to reportlab (the standard 14 fonts and anything
    registered earlier) resolve directly. Other names are looked up in
    ``font_files`` and then in ``font_dirs`` by file name, and registered as
    TrueType fonts on first use.
    """

    def __init__(
        self,
        font_files: Optional[Dict[str, Union[str, Path]]] = None,
        font_dirs: Optional[Sequence[Union[str, Path]]] = None,
    ) -> None:
        self.font_files: Dict[str, Path] = {k: Path(v) for k, v in (font_files or {}).items()}
        self.font_dirs = [Path(d) for d in (font_dirs or ())]
        self._known: Set[str] = set()
        self._lock = threading.Lock()

    def resolve(self, name: str, size: float) -> Font:
        """
        Resolve ``name`` at ``size`` points.

        Raises:
            FontResolutionError: If the face cannot be found or loaded
        """
        if not name:
            raise FontResolutionError(name, "empty font name")
        if size <= 0:
            raise FontResolutionError(name, f"invalid font size {size}")

        with self._lock:
            if name not in self._known:
                self._ensure_registered(name)
                self._known.add(name)
        return Font(name=name, size=float(size))

    def is_resolvable(self, name: str) -> bool:
        try:
            self.resolve(name, 1.0)
        except FontResolutionError:
            return False
        return True

    def register_font_file(self, name: str, path: Union[str, Path]) -> None:
        path = Path(path)
        if not path.is_file():
            raise FontResolutionError(name, f"font file not found: {path}")
        try:
            pdfmetrics.registerFont(TTFont(name, str(path)))
        except TTFError as exc:
            raise FontResolutionError(name, f"cannot load {path}: {exc}") from exc
        logger.debug("Registered TrueType font %s from %s", name, path)

    def _ensure_registered(self, name: str) -> None:
        if name in pdfmetrics.getRegisteredFontNames() or name in STANDARD_FONTS:
            pdfmetrics.getFont(name)
            return

        path = self.font_files.get(name) or self._find_in_dirs(name)
        if path is not None:
            self.register_font_file(name, path)
            return

        # Fall back to reportlab's own search (Type 1 fonts on its search path).
        try:
            pdfmetrics.getFont(name)
        except (KeyError, ValueError, OSError) as exc:
            raise FontResolutionError(name, "font is not registered and no font file was found") from exc

    def _find_in_dirs(self, name: str) -> Optional[Path]:
        candidates = _candidate_filenames(name)
        for directory in self.font_dirs:
            if not directory.is_dir():
                continue
            for candidate in candidates:
                path = directory / candidate
                if path.is_file():
                    return path
        return None


def _candidate_filenames(name: str) -> Iterable[str]:
    stems = {name, name.replace(" ", ""), name.lower(), name.replace(" ", "").lower()}
    return [stem + ext for stem in sorted(stems) for ext in FONT_EXTENSIONS]
