import numpy as np
import pytest

from lenslab.interp import as_stack, downsample, lanczos_blur, lanczos_kernel, translate


@pytest.mark.parametrize(
    "reduce", ["mean", "max", "min"]
)  # these arguments all return the same for kron ones data
def test_downsample_on_kron(reduce):
    truth = np.r_[0:4].reshape(2, 2)
    # downsample by 2, data multiple of 2
    x = np.kron(truth, np.ones((2, 2)))
    y = downsample(x, 2, reduce=reduce)
    assert (truth == y).all()

    y = downsample(x, (2, 2), reduce=reduce)
    assert (truth == y).all()

    # downsample by (3,2), data multiple of 3,2
    x = np.kron(truth, np.ones((3, 2)))
    y = downsample(x, (3, 2), reduce=reduce)
    assert (truth == y).all()

    x = np.kron(truth, np.ones((7, 3, 3)))
    y = downsample(x, 3, reduce=reduce)
    assert truth.shape == y.shape[1:]
    assert y.shape[0] == 2
    assert (truth == y[0]).all()


def test_downsample_last_axes():
    x = np.r_[1 : 24 + 1].reshape(6, 4).T
    y = downsample(x, 2)
    assert (y == np.array([[3.5, 11.5, 19.5], [5.5, 13.5, 21.5]])).all()


@pytest.mark.parametrize(
    "shape,expected",
    [((5, 6), (1, 5, 6, 1)), ((5, 6, 3), (1, 5, 6, 3)), ((2, 5, 6, 3), (2, 5, 6, 3))],
)
def test_as_stack_shares_memory(shape, expected):
    img = np.zeros(shape)
    stack = as_stack(img)
    assert stack.shape == expected
    stack[0, 1, 2, 0] = 7
    assert img.sum() == 7


def test_as_stack_rejects_1d():
    with pytest.raises(ValueError):
        as_stack(np.zeros(5))


def test_translate_integer():
    img = np.r_[1:26].reshape(5, 5).astype(float)
    right = translate(img, 1, 0)
    assert (right[:, 1:] == img[:, :-1]).all()
    assert (right[:, 0] == 0).all()

    down = translate(img, 0, 2)
    assert (down[2:] == img[:-2]).all()
    assert (down[:2] == 0).all()

    assert translate(img, 0, 0) is img


def test_translate_subpixel_color():
    img = np.random.default_rng(0).random((6, 7, 3))
    half = translate(img, 0.5, 0)
    assert half.shape == img.shape
    assert np.allclose(half[:, 1:], 0.5 * (img[:, 1:] + img[:, :-1]))

    # a round trip through opposite shifts is a 3 tap blur away from the border
    img = np.random.default_rng(1).random((8, 5, 3))
    back = translate(translate(img, 0, 1.25), 0, -1.25)
    blur = 0.625 * img[2:-2] + 0.1875 * (img[1:-3] + img[3:-1])
    assert np.allclose(back[2:-2], blur)


@pytest.mark.parametrize("radius", [1, 1.5, 2, 3.7])
def test_lanczos_kernel(radius):
    k = lanczos_kernel(radius)
    assert k.size % 2 == 1
    assert np.isclose(k.sum(), 1)
    assert np.allclose(k, k[::-1])
    assert k.argmax() == k.size // 2


def test_lanczos_kernel_rejects_zero():
    with pytest.raises(ValueError):
        lanczos_kernel(0)


def test_lanczos_blur_keeps_constants():
    img = np.full((9, 11, 2), 0.25)
    assert np.allclose(lanczos_blur(img, 2.5), img)


def test_lanczos_blur_spreads_impulse():
    img = np.zeros((15, 15))
    img[7, 7] = 1
    out = lanczos_blur(img, 2, 2)
    assert np.isclose(out.sum(), 1)
    assert out[7, 7] < 1
    assert out[7, 8] > 0 and out[8, 7] > 0
    assert np.allclose(out, out.T)

    # only blurs along x when ry is zero
    out = lanczos_blur(img, 2, 0)
    assert (out[6] == 0).all() and (out[8] == 0).all()
