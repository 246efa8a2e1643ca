import numpy as np

from lenslab import lifi
from lenslab import sim as objects
from lenslab.lifi import LightField, focal_stack
from lenslab.lifi import sim


def test_two_disks_shape_and_range():
    lf = sim.two_disks(nU=3, nY=31)
    assert lf.shape == (3, 3, 31, 31)
    assert lf.max() == 1
    assert lf.min() >= 0
    assert lf.flags.c_contiguous


def test_two_disks_parallax():
    # the disks sit off the focal plane, so the corner views differ
    lf = sim.two_disks(nU=3, nY=31)
    assert not np.allclose(lf[0, 0], lf[-1, -1])


def test_even_sized_grids():
    clf = sim.generate_continuous_lightfield(
        [(500, 0, 0, objects.continuous_rectangle(4, 4))], f=50, F=500
    )
    lf = sim.discretize(clf, 2, 4, 6, 8, 1, 1, 1, 1)
    assert lf.shape == (2, 4, 6, 8)


def test_oversample_averages_down():
    clf = sim.generate_continuous_lightfield(
        [(400, 0, 0, objects.continuous_constant(2.0))], f=50, F=400
    )
    lf = sim.discretize(clf, 3, 3, 5, 5, 0.3, 0.3, 0.02, 0.02, oversample=3)
    assert lf.shape == (3, 3, 5, 5)
    assert np.allclose(lf, 2.0)


def test_lenslet_round_trip():
    lf = sim.two_disks(nU=3, nY=21)
    img = sim.lenslet_lf(lf)
    assert img.shape == (21 * 3, 21 * 3, 1)
    view = LightField(img, 3, 3)
    assert np.array_equal(view.views()[..., 0], lf)


def test_focal_plane_matches_aperture_sum():
    lf = sim.two_disks(nU=3, nY=21)
    fs = focal_stack(LightField(sim.lenslet_lf(lf), 3, 3), 0, 0, 1)
    assert np.allclose(fs[0, ..., 0], lifi.focal_plane_image(lf) / 9)


def test_view_constant_lf():
    img = sim.view_constant_lf([[1, 2], [3, 4]], 3, 5)
    lf = LightField(img, 2, 2)
    assert (lf.view(1, 0) == 2).all()
    assert (lf.view(0, 1) == 3).all()


def test_subaperture_matrix():
    lf = np.arange(2 * 3 * 4 * 5).reshape(2, 3, 4, 5)
    mat = lifi.draw_subaperture_matrix(lf)
    assert mat.shape == (8, 15)
    assert np.array_equal(mat[4:8, 5:10], lf[1, 1])
