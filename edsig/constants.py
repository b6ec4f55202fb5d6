"""Curve parameters for edwards25519 and its base point."""

# Field prime: 2**255 - 19.
P = 57896044618658097711785492504343953926634992332820282019728792003956564819949

# Curve constant d of -x^2 + y^2 = 1 + d*x^2*y^2.
D = 37095705934669439343138083508754565189542113879843219016388785533085940283555

# Order of the prime-order subgroup generated by the base point.
Q = 7237005577332262213973186563042994240857116359379907606001950938285454250989

# A square root of -1 modulo P.
MODP_SQRT_M1 = 19681161376707505956807079304988542015446066515923890162744021073123829784752

# Base point in extended coordinates (X, Y, Z=1, T=X*Y).
G_X = 15112221349535400772501151409588531511454012693041857206046113283949847762202
G_Y = 46316835694926478169428394003475163141307993866256225615783033603165251855960
G_Z = 1
G_T = 46827403850823179245072216630277197565144205554125654976674165829533817101731

__all__ = ["P", "D", "Q", "MODP_SQRT_M1", "G_X", "G_Y", "G_Z", "G_T"]