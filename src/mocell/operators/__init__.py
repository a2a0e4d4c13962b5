from .real import PolynomialMutationKernel, SBXKernel

__all__ = ["PolynomialMutationKernel", "SBXKernel"]
