"""Configuration for this instance of polyspec."""
from .mathops import np


class Config(object):
    """Global configuration of polyspec."""
    def __init__(self,
                 precision=64,
                 integration_step=5,
                 visible_range=(400, 700),
                 saturation_lift=True,
                 heuristic_gamma=0.8,
                 heuristic_range=(380, 740),
                 fallback_gray=128,
                 lw=3,
                 zorder=3,
                 alpha=1,
                 interpolation='lanczos'):
        """Create a new Config object.

        Parameters
        ----------
        precision : int
            32 or 64, number of bits of precision
        integration_step : float
            wavelength step of the tristimulus integration, in nm
        visible_range : tuple of float
            (min, max) wavelength range integrated for perceived colors, in nm
        saturation_lift : bool
            whether perceived colors receive the display saturation lift by default
        heuristic_gamma : float
            exponent applied by the heuristic wavelength colorizer
        heuristic_range : tuple of float
            (min, max) wavelengths the heuristic colorizer gives a hue to
        fallback_gray : int
            0..255 channel value of the neutral gray returned outside heuristic_range
        lw : float
            linewidth
        zorder : int, optional
            zorder used for graphics made with matplotlib
        alpha : float
            transparency of lines (1=opaque) for graphics made with matplotlib
        interpolation : str
            interpolation type for image backgrounds

        """
        self.precision = precision
        self.integration_step = integration_step
        self.visible_range = visible_range
        self.saturation_lift = saturation_lift
        self.heuristic_gamma = heuristic_gamma
        self.heuristic_range = heuristic_range
        self.fallback_gray = fallback_gray
        self.lw = lw
        self.zorder = zorder
        self.alpha = alpha
        self.interpolation = interpolation

    @property
    def precision(self):
        """Precision used for computations.

        Returns
        -------
        object : numpy.float32 or numpy.float64
            precision used

        """
        return self._precision

    @precision.setter
    def precision(self, precision):
        """Adjust precision used by polyspec.

        Parameters
        ----------
        precision : int, {32, 64}
            what precision to use; either 32 or 64 bits

        Raises
        ------
        ValueError
            if precision is not a valid option

        """
        if precision not in (32, 64):
            raise ValueError('invalid precision.  Precision should be 32 or 64.')

        if precision == 32:
            self._precision = np.float32
        else:
            self._precision = np.float64

    @property
    def integration_step(self):
        """Wavelength step of the tristimulus integration, in nm."""
        return self._integration_step

    @integration_step.setter
    def integration_step(self, step):
        """Adjust the integration step.

        Raises
        ------
        ValueError
            if step is not positive

        """
        if not step > 0:
            raise ValueError('integration step must be positive.')

        self._integration_step = step

    @property
    def fallback_gray(self):
        """Channel value of the neutral gray used outside the heuristic range."""
        return self._fallback_gray

    @fallback_gray.setter
    def fallback_gray(self, value):
        if not 0 <= value <= 255:
            raise ValueError('fallback gray must be within 0..255.')

        self._fallback_gray = int(value)


config = Config()
