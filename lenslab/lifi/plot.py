import matplotlib.pyplot as plt
import numpy as np

from ..utils import export


def _display(img):
    """squeeze single channel images so imshow applies the colormap"""
    img = np.asarray(img)
    if img.shape[-1] == 1:
        return img[..., 0]
    return np.clip(img, 0, 1) if img.dtype.kind == "f" else img


### Plotting
@export
def show_lf(lf, *, figsize=None, cmap="gray", constant_clim=True, labels=False):
    """Grid of the subaperture views of a LightField"""
    views = lf.views()
    cmax = views.max()
    cmin = views.min()
    fig = plt.figure(constrained_layout=False, figsize=figsize)
    gs = fig.add_gridspec(nrows=lf.nV, ncols=lf.nU, wspace=0.05, hspace=0.05)
    for v in range(lf.nV):
        for u in range(lf.nU):
            ax = fig.add_subplot(gs[v, u])
            im_art = ax.imshow(_display(views[v, u]), cmap=cmap)
            ax.set_xticks([])
            ax.set_yticks([])
            if constant_clim:
                im_art.set_clim(cmin, cmax)
            if v == 0:
                ax.set_title(u)
            if u == 0:
                ax.set_ylabel(v)
    ax.set_xticks([0, lf.nX - 1])
    ax.set_yticks([0, lf.nY - 1])
    ax.yaxis.tick_right()
    ax.yaxis.set_label_position("right")
    if labels:
        ax.set_xlabel("x")
        fig.supylabel("v", rotation=0)
        fig.suptitle("u")
    return fig


@export
def show_focal_stack(stack, alphas=None, *, ncols=4, figsize=None, cmap="gray"):
    """One panel per frame of a (frames, height, width, channels) stack"""
    nF = stack.shape[0]
    ncols = min(ncols, nF)
    nrows = -(-nF // ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=figsize, squeeze=False)
    for ii, ax in enumerate(axes.flat):
        ax.set_xticks([])
        ax.set_yticks([])
        if ii >= nF:
            ax.set_axis_off()
            continue
        ax.imshow(_display(stack[ii]), cmap=cmap)
        if alphas is not None:
            ax.set_title(f"α = {alphas[ii]:.3g}")
    return fig
