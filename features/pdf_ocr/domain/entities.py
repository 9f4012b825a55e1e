"""
Domain entities for the PDF → OCR feature.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class PageBitmap:
    """Rasterized page: RGB, 8 bits per channel, row-major samples."""

    page_number: int  # 1-based
    width: int
    height: int
    samples: bytes

    @property
    def expected_size(self) -> int:
        return self.width * self.height * 3


@dataclass(frozen=True)
class RasterConfig:
    """Affine scale used to rasterize pages (no rotation, shear or translation)."""

    scale_x: float = 2.0
    scale_y: float = 2.0
    colorspace: str = "rgb"
    alpha: bool = False


@dataclass(frozen=True)
class OcrConfig:
    """
    Fixed OCR profile.

    - language: Tesseract language model ("por" = Portuguese)
    - dpi: input resolution hint
    - psm: page segmentation mode (6 = assume a single uniform block of text)
    - oem: engine mode (3 = default, legacy + LSTM)
    - config_variables: extra `-c key=value` flags; Tesseract needs an
      output-format flag, so txt output is switched on
    """

    language: str = "por"
    dpi: int = 300
    psm: int = 6
    oem: int = 3
    config_variables: Dict[str, str] = field(
        default_factory=lambda: {"tessedit_create_txt": "1"}
    )

    def to_tesseract_config(self) -> str:
        parts = [f"--dpi {self.dpi}", f"--psm {self.psm}", f"--oem {self.oem}"]
        for key, value in self.config_variables.items():
            parts.append(f"-c {key}={value}")
        return " ".join(parts)
