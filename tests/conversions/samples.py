# Reference values for sRGB bytes under a D65 white, rounded to 2 decimals
samples_rgb_lab = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (100.0, 0.0, 0.0),
    (255, 0, 0): (53.24, 80.09, 67.20),
    (0, 255, 0): (87.73, -86.18, 83.18),
    (0, 0, 255): (32.30, 79.19, -107.86),
    (128, 128, 128): (53.59, 0.0, 0.0),
}

samples_rgb_luv = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (100.0, 0.0, 0.0),
    (255, 0, 0): (53.24, 175.01, 37.76),
    (0, 255, 0): (87.73, -83.08, 107.40),
    (0, 0, 255): (32.30, -9.40, -130.34),
}

# Linear-light RGB samples spread over the cube, including its corners
samples_linear_rgb = [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (1.0, 1.0, 0.0),
    (0.0, 1.0, 1.0),
    (1.0, 0.0, 1.0),
    (0.2, 0.4, 0.6),
    (0.9, 0.05, 0.3),
    (0.001, 0.002, 0.003),
    (0.5, 0.5, 0.5),
]
