# guards division by zero and variance collapse
EPSILON = 1e-8
