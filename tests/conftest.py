import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import snapshot_pdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Row boundaries of the banded test image (1000x4000px -> 840mm on A4)
BAND_ROWS = (1414, 2828, 4000)
BAND_COLORS = ("red", "lime", "blue")


def make_banded_image(width: int = 1000, height: int = 4000) -> Image.Image:
    """Tall RGB image with three horizontal colour bands."""
    img = Image.new("RGB", (width, height), "white")
    top = 0
    for bottom, color in zip(BAND_ROWS, BAND_COLORS):
        img.paste(color, (0, top, width, min(bottom, height)))
        top = bottom
    return img


@pytest.fixture
def banded_image():
    """Create the banded 1000x4000 test image."""
    img = make_banded_image()
    yield img
    img.close()


@pytest.fixture
def banded_png(tmp_path: Path):
    """Write the banded test image to disk."""
    img_path = tmp_path / "receipt.png"
    with make_banded_image() as img:
        img.save(img_path)
    return img_path


@pytest.fixture
def sample_pdf(tmp_path: Path):
    """Create a two-page 200x100pt PDF."""
    import fitz

    pdf_path = tmp_path / "order.pdf"
    doc = fitz.open()
    for _ in range(2):
        page = doc.new_page(width=200, height=100)
        page.draw_rect(fitz.Rect(10, 10, 190, 90), color=(0, 0, 0), fill=(1, 0, 0))
    doc.save(pdf_path)
    doc.close()
    return pdf_path
