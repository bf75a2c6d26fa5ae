"""Plotting-related functions."""
from .conf import config
from .colorimetry import perceived_hex
from .wavelength import render_spectrum_background


def share_fig_ax(fig=None, ax=None, numax=1, sharex=False, sharey=False):
    """Reurns the given figure and/or axis if given one.  If they are None, creates a new fig/ax.

    Parameters
    ----------
    fig : matplotlib.figure.Figure, optional
        figure
    ax : matplotlib.axes.Axis
        axis or array of axes
    numax : int
        number of axes in the desired figure
    sharex : bool, optional
        whether to share the x axis
    sharey : bool, optional
        whether to share the y axis

    Returns
    -------
    matplotlib.figure.Figure
        A figure object
    matplotlib.axes.Axis
        An axis object

    """
    from matplotlib import pyplot as plt

    if fig is None and ax is None:
        fig, ax = plt.subplots(nrows=1, ncols=numax, sharex=sharex, sharey=sharey)
    elif ax is None:
        ax = fig.gca()

    return fig, ax


def plot_absorbance(spectrum, wvl_range=(350, 750), yrange=(0, 2), step=2, fig=None, ax=None):
    """Plot an absorbance spectrum over a rainbow of the visible band.

    Parameters
    ----------
    spectrum : `polyspec.spectrum.Spectrum`
        spectrum to plot
    wvl_range : `iterable`
        pair of lower and upper wavelength bounds, nm
    yrange : `iterable`
        pair of lower and upper absorbance bounds
    step : `float`
        sampling of the curve, nm
    fig : `matplotlib.figure.Figure`
        Figure to draw plot in
    ax : `matplotlib.axes.Axis`
        Axis to draw plot in

    Returns
    -------
    fig : `matplotlib.figure.Figure`
        Figure to draw plot in
    ax : `matplotlib.axes.Axis`
        Axis to draw plot in

    """
    wvl, values = spectrum.sample(wvl_range[0], wvl_range[1], step)
    vis_lo, vis_hi = config.visible_range

    bg = render_spectrum_background(wvl_range[0], wvl_range[1])
    fig, ax = share_fig_ax(fig, ax)
    ax.imshow(bg, extent=[*wvl_range, *yrange], interpolation=config.interpolation, aspect='auto')
    ax.fill_between(wvl, values, yrange[1], facecolor='w', alpha=0.5)
    ax.plot(wvl, values, lw=config.lw, c='k', alpha=config.alpha, zorder=config.zorder)
    ax.axvspan(wvl_range[0], vis_lo, facecolor='0.5', alpha=0.3)
    ax.axvspan(vis_hi, wvl_range[1], facecolor='0.5', alpha=0.3)
    ax.set(xlim=wvl_range, xlabel=r'Wavelength $\lambda$ [nm]',
           ylim=yrange, ylabel='Absorbance')

    return fig, ax


def plot_perceived_color(spectrum, touch_up=None, fig=None, ax=None):
    """Draw a swatch of the color perceived through a spectrum.

    Parameters
    ----------
    spectrum : `polyspec.spectrum.Spectrum`
        spectrum the light passes through
    touch_up : `bool`, optional
        apply the display saturation lift, defaults to config.saturation_lift
    fig : `matplotlib.figure.Figure`
        Figure to draw plot in
    ax : `matplotlib.axes.Axis`
        Axis to draw plot in

    Returns
    -------
    fig : `matplotlib.figure.Figure`
        Figure to draw plot in
    ax : `matplotlib.axes.Axis`
        Axis to draw plot in

    """
    color = perceived_hex(spectrum, touch_up=touch_up)
    fig, ax = share_fig_ax(fig, ax)
    ax.set_facecolor(color)
    ax.set(xticks=[], yticks=[], title=f'Perceived color {color}')
    return fig, ax
