class Initializer:
    # Subclasses override initialize
    def initialize(self, fan_in, fan_out):
        # Return a Matrix of shape (fan_out, fan_in)
        raise NotImplementedError
