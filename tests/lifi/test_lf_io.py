import numpy as np
from PIL import Image
import pytest

import lenslab
from lenslab.lifi import LightField, io


@pytest.fixture
def view_dir(tmp_path):
    rng = np.random.default_rng(0)
    views = rng.integers(0, 256, (2, 3, 4, 5, 3)).astype(np.uint8)
    for v in range(2):
        for u in range(3):
            Image.fromarray(views[v, u]).save(tmp_path / f"view_{v}_{u}.png")
    return tmp_path, views


def test_load_views(view_dir):
    path, views = view_dir
    lf = io.load(str(path), ".png", v=2)
    assert lf.shape == (2, 3, 4, 5, 3)
    assert np.allclose(lf, views / 255)


def test_load_lenslet(view_dir):
    path, views = view_dir
    img, nU, nV = io.load_lenslet(str(path), ".png", u=3)
    assert (nU, nV) == (3, 2)
    lf = LightField(img, nU, nV)
    assert np.allclose(lf.view(2, 1), views[1, 2] / 255)


def test_load_rejects_bad_grid(view_dir):
    path, _ = view_dir
    with pytest.raises(ValueError, match="arrange"):
        io.load(str(path), ".png", v=4)


def test_load_missing(tmp_path):
    with pytest.raises(ValueError, match="No images"):
        io.load(str(tmp_path), ".png")


def test_lf_directories(tmp_path, monkeypatch):
    scene = tmp_path / "lightfield" / "lab" / "chess"
    scene.mkdir(parents=True)
    (scene / "config.toml").write_text('nU = 17\n')
    monkeypatch.setattr(lenslab.config, "DATABANK", str(tmp_path))
    assert io.get_lf_directories() == {"chess": str(scene)}
