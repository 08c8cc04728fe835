"""Parameter sets and domain-separation constants of the HQC scheme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Domain(IntEnum):
    """SHAKE-256 domain-separation bytes, kept distinct to avoid collisions."""

    PRNG = 1
    SEEDEXPANDER = 2
    G_FCT = 3
    K_FCT = 4


def ceil_divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` and round the result up."""
    if b <= 0:
        raise ValueError(f"divisor must be positive, got {b}")
    return (a + b - 1) // b


@dataclass(frozen=True)
class ParameterSet:
    """The numeric parameters of one HQC security level."""

    name: str
    n: int
    n1: int
    n2: int
    n1n2: int
    omega: int
    omega_e: int
    omega_r: int
    delta: int
    m: int
    gf_poly: int
    gf_poly_wt: int
    gf_poly_m2: int
    gf_mul_order: int
    k: int
    g: int
    fft: int
    rs_poly_coefs: tuple[int, ...]
    red_mask: int
    shake256_512_bytes: int = 64
    seed_bytes: int = 40
    salt_size_bytes: int = 16
    shared_secret_bytes: int = 64

    def __post_init__(self) -> None:
        if len(self.rs_poly_coefs) != self.g:
            raise ValueError(
                f"expected {self.g} generator coefficients, got {len(self.rs_poly_coefs)}"
            )
        if self.n1n2 != self.n1 * self.n2:
            raise ValueError("n1n2 must equal n1 * n2")

    @property
    def vec_k_size_bytes(self) -> int:
        return self.k

    @property
    def vec_n1_size_bytes(self) -> int:
        return self.n1

    def vec_n_size_bytes(self) -> int:
        """Bytes needed to hold a vector of ``n`` bits."""
        return ceil_divide(self.n, 8)

    def vec_n_size_64(self) -> int:
        """64-bit words needed to hold a vector of ``n`` bits."""
        return ceil_divide(self.n, 64)

    def vec_n1n2_size_bytes(self) -> int:
        """Bytes needed to hold a concatenated-code word of ``n1 * n2`` bits."""
        return ceil_divide(self.n1n2, 8)

    def vec_n1n2_size_64(self) -> int:
        """64-bit words needed to hold a concatenated-code word."""
        return ceil_divide(self.n1n2, 64)

    def empty_bits(self) -> int:
        """Unused high bits in the last word of an ``n``-bit vector."""
        return self.vec_n_size_64() * 64 - self.n

    def public_key_bytes(self) -> int:
        """Size of a serialised public key: seed followed by the syndrome."""
        return self.seed_bytes + self.vec_n_size_bytes()

    def secret_key_bytes(self) -> int:
        """Size of a serialised secret key: seed, sigma and the public key."""
        return self.seed_bytes + self.vec_k_size_bytes + self.public_key_bytes()

    def ciphertext_bytes(self) -> int:
        """Size of a serialised ciphertext: u, v and the salt."""
        return self.vec_n_size_bytes() + self.vec_n1n2_size_bytes() + self.salt_size_bytes


HQC128 = ParameterSet(
    name="HQC-128",
    n=17669,
    n1=46,
    n2=384,
    n1n2=17664,
    omega=66,
    omega_e=75,
    omega_r=75,
    delta=15,
    m=8,
    gf_poly=0x11D,
    gf_poly_wt=5,
    gf_poly_m2=4,
    gf_mul_order=255,
    k=16,
    g=31,
    fft=4,
    rs_poly_coefs=(
        89, 69, 153, 116, 176, 117, 111, 75, 73, 233, 242, 233, 65, 210, 21, 139,
        103, 173, 67, 118, 105, 210, 174, 110, 74, 69, 228, 82, 255, 181, 1,
    ),
    red_mask=0x1F,
)

HQC192 = ParameterSet(
    name="HQC-192",
    n=35851,
    n1=56,
    n2=640,
    n1n2=35840,
    omega=100,
    omega_e=114,
    omega_r=114,
    delta=16,
    m=8,
    gf_poly=0x11D,
    gf_poly_wt=5,
    gf_poly_m2=4,
    gf_mul_order=255,
    k=24,
    g=33,
    fft=5,
    rs_poly_coefs=(
        45, 216, 239, 24, 253, 104, 27, 40, 107, 50, 163, 210, 227, 134, 224, 158,
        119, 13, 158, 1, 238, 164, 82, 43, 15, 232, 246, 142, 50, 189, 29, 232, 1,
    ),
    red_mask=0x7FF,
)