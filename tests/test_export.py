import io
import json

import numpy as np
import pytest
from PIL import Image

from gencolormap.export import to_csv, to_json, to_ppm, serialize
from gencolormap.types import OutputFormat

colors = np.array([255, 0, 0, 0, 128, 255, 10, 20, 30], dtype=np.uint8)


def test_csv():
    assert to_csv(colors) == "255, 0, 0\n0, 128, 255\n10, 20, 30\n"

def test_json():
    data = json.loads(to_json(colors))
    assert data == {"colormap": [[255, 0, 0], [0, 128, 255], [10, 20, 30]]}

def test_ppm_header_and_pixels():
    data = to_ppm(colors)
    assert data.startswith(b"P6")
    assert data.endswith(colors.tobytes())
    image = Image.open(io.BytesIO(data))
    assert image.size == (3, 1)
    assert image.mode == "RGB"
    assert np.asarray(image).tolist() == [[[255, 0, 0], [0, 128, 255], [10, 20, 30]]]

def test_serialize_dispatch():
    assert serialize(colors, OutputFormat.CSV) == to_csv(colors)
    assert serialize(colors, "json") == to_json(colors)
    assert serialize(colors, "ppm") == to_ppm(colors)

def test_serialize_unknown_format():
    with pytest.raises(ValueError, match="Unknown output format"):
        serialize(colors, "png")

def test_partial_triple_rejected():
    with pytest.raises(ValueError):
        to_csv(colors[:4])
