from collections import namedtuple

# UNESCO 1983 (EOS-80) coefficient tables.
# Fofonoff, P. and Millard, R.C. Jr, UNESCO Tech. Pap. in Mar. Sci. No. 44.
# Each table is ordered lowest power first.

T68_FACTOR = 1.00024          # T68 = T90 * 1.00024
T48_QUADRATIC = 4.4e-6        # IPTS-48 -> IPTS-68 correction

DBAR_PER_BAR = 10.0

# Standard seawater
S_STANDARD = 35.0
T_STANDARD = 0.0
C3515 = 42.914                # conductivity C(35,15,0) in mS/cm

SMOW = (999.842594, 6.793952e-2, -9.095290e-3, 1.001685e-4,
        -1.120083e-6, 6.536332e-9)

# One-atmosphere equation of state (Millero & Poisson 1981)
Dens0Coeffs = namedtuple('Dens0Coeffs', 'b c d0')
DENS0 = Dens0Coeffs(
    b=(8.24493e-1, -4.0899e-3, 7.6438e-5, -8.2467e-7, 5.3875e-9),
    c=(-5.72466e-3, 1.0227e-4, -1.6546e-6),
    d0=4.8314e-4,
)

# Secant bulk modulus, UNESCO eqns 15-19
SecantCoeffs = namedtuple('SecantCoeffs', 'h k e i j0 m f g')
SECANT = SecantCoeffs(
    h=(3.239908, 1.43713e-3, 1.16092e-4, -5.77905e-7),
    k=(8.50935e-5, -6.12293e-6, 5.2787e-8),
    e=(19652.21, 148.4206, -2.327105, 1.360477e-2, -5.155288e-5),
    i=(2.2838e-3, -1.0981e-5, -1.6078e-6),
    j0=1.91075e-4,
    m=(-9.9348e-7, 2.0816e-8, 9.1697e-10),
    f=(54.6746, -0.603459, 1.09987e-2, -6.1670e-5),
    g=(7.944e-2, 1.6483e-2, -5.3009e-4),
)

# Adiabatic lapse rate (Bryden 1973)
AdtgCoeffs = namedtuple('AdtgCoeffs', 'a b c d e')
ADTG = AdtgCoeffs(
    a=(3.5803e-5, 8.5258e-6, -6.836e-8, 6.6228e-10),
    b=(1.8932e-6, -4.2393e-8),
    c=(1.8741e-8, -6.7795e-10, 8.733e-12, -5.4481e-14),
    d=(-1.1351e-10, 2.7759e-12),
    e=(-4.6206e-13, 1.8676e-14, -2.1687e-16),
)

# Sound velocity, Chen & Millero 1977 (UNESCO eqns 33-37).
# Rows are powers of pressure, columns powers of temperature.
SvelCoeffs = namedtuple('SvelCoeffs', 'cw a b d')
SVEL = SvelCoeffs(
    cw=((1402.388, 5.03711, -5.80852e-2, 3.3420e-4, -1.47800e-6, 3.1464e-9),
        (0.153563, 6.8982e-4, -8.1788e-6, 1.3621e-7, -6.1185e-10),
        (3.1260e-5, -1.7107e-6, 2.5974e-8, -2.5335e-10, 1.0405e-12),
        (-9.7729e-9, 3.8504e-10, -2.3643e-12)),
    a=((1.389, -1.262e-2, 7.164e-5, 2.006e-6, -3.21e-8),
       (9.4742e-5, -1.2580e-5, -6.4885e-8, 1.0507e-8, -2.0122e-10),
       (-3.9064e-7, 9.1041e-9, -1.6002e-10, 7.988e-12),
       (1.100e-10, 6.649e-12, -3.389e-13)),
    b=((-1.922e-2, -4.42e-5),
       (7.3637e-5, 1.7945e-7)),
    d=(1.727e-3, -7.9836e-6),
)

# Depth from pressure (Saunders & Fofonoff 1976)
DEPTH_C = (9.72659, -2.2512e-5, 2.279e-10, -1.82e-15)
GAM_DASH = 2.184e-6
GRAVITY_EQUATOR = 9.780318
GRAVITY_X = (5.2788e-3, 2.36e-5)

# Pressure from depth (Saunders 1981)
SAUNDERS_C1 = (5.92e-3, 5.25e-3)
SAUNDERS_C2 = 4.42e-6

# Practical salinity PSS-78
SalCoeffs = namedtuple('SalCoeffs', 'A B C a b k')
PSS78 = SalCoeffs(
    A=(2.070e-5, -6.370e-10, 3.989e-15),
    B=(3.426e-2, 4.464e-4, 4.215e-1, -3.107e-3),
    C=(6.766097e-1, 2.00564e-2, 1.104259e-4, -6.9698e-7, 1.0031e-9),
    a=(0.0080, -0.1692, 25.3851, 14.0941, -7.0261, 2.7081),
    b=(0.0005, -0.0056, -0.0066, -0.0375, 0.0636, -0.0144),
    k=0.0162,
)

# Practical envelope of the UNESCO polynomials: (min, max)
ENVELOPE = {
    'salinity':    (0.0, 42.0),
    'temperature': (-2.0, 40.0),
    'pressure':    (0.0, float('inf')),
    'latitude':    (-90.0, 90.0),
}

# App defaults
DEFAULT_LATITUDE = 4.0
DEFAULT_REFERENCE_PRESSURE = 0.0
