from .Layer import Hidden
from .Parametric import Parametric
from .Deferred import Deferred
from ..initializers import Constant
from ..parameters import Parameter
from ..constants import EPSILON
from ..exceptions import ConfigurationError, StateError


class BatchNorm(Hidden, Parametric):
    """
    Batch normalization.

    Normalizes each feature to zero mean and unit variance over the batch,
    then scales by gamma and shifts by beta. Running averages of the batch
    statistics are kept for inference.

    References:
    [1] S. Ioffe et al. (2015). Batch Normalization: Accelerating Deep
    Network Training by Reducing Internal Covariate Shift.
    """

    PARAMETERS = ("beta", "gamma")
    STATISTICS = ("mean", "variance")

    def __init__(self, decay=0.9, beta_initializer=None, gamma_initializer=None):
        super().__init__()
        if not 0.0 <= decay <= 1.0:
            raise ConfigurationError(f"Decay must be between 0 and 1, {decay} given.")

        self.decay = decay
        self.beta_initializer = beta_initializer or Constant(0.0)
        self.gamma_initializer = gamma_initializer or Constant(1.0)

        self.beta = None
        self.gamma = None

        # running statistics, seeded by the first forward pass
        self.mean = None
        self.variance = None

        # forward cache
        self.std_inv = None
        self.x_hat = None

    def initialize(self, fan_in):
        self.beta = Parameter(self.beta_initializer.initialize(fan_in, 1).row(0))
        self.gamma = Parameter(self.gamma_initializer.initialize(fan_in, 1).row(0))
        self._width = fan_in
        return fan_in

    def forward(self, x):
        self._check_initialized()

        mean = x.mean(axis=0)
        variance = x.variance(axis=0)

        if self.mean is None or self.variance is None:
            self.mean = mean
            self.variance = variance

        std_inv = variance.clip_lower(EPSILON).sqrt().reciprocal()
        x_hat = (x - mean) * std_inv

        self.mean = self.mean * self.decay + mean * (1.0 - self.decay)
        self.variance = self.variance * self.decay + variance * (1.0 - self.decay)

        self.std_inv = std_inv
        self.x_hat = x_hat

        return x_hat * self.gamma.w + self.beta.w

    def infer(self, x):
        self._check_initialized()
        if self.mean is None or self.variance is None:
            raise StateError("Running statistics are not available until after a forward pass.")

        x_hat = (x - self.mean) / self.variance.clip_lower(EPSILON).sqrt()

        return x_hat * self.gamma.w + self.beta.w

    def back(self, prev_gradient, optimizer):
        self._check_initialized()
        if self.std_inv is None or self.x_hat is None:
            raise StateError("Must perform forward pass before backpropagating.")

        std_inv, x_hat = self.std_inv, self.x_hat
        gamma = self.gamma.w
        self.reset()

        def gradient():
            d_out = prev_gradient()

            d_beta = d_out.sum(axis=0)
            d_gamma = (d_out * x_hat).sum(axis=0)

            optimizer.step(self.beta, d_beta)
            optimizer.step(self.gamma, d_gamma)

            m = d_out.m
            d_x_hat = d_out * gamma

            x_hat_sigma = (d_x_hat * x_hat).sum(axis=0)
            d_x_hat_sigma = d_x_hat.sum(axis=0)

            return (d_x_hat * m - d_x_hat_sigma - x_hat * x_hat_sigma) * (std_inv / m)

        return Deferred(gradient)

    def reset(self):
        self.std_inv = None
        self.x_hat = None

    def _restored_width(self):
        return self.beta.w.n

    def restored_fan_in(self):
        return self.beta.w.n

    def __repr__(self):
        return f"BatchNorm(decay={self.decay})"
