from buildplan.core.packages.abc import PackageOracle
from buildplan.core.packages.fake import FakePackageOracle
from buildplan.core.packages.real import RealPackageOracle

__all__ = [
    "FakePackageOracle",
    "PackageOracle",
    "RealPackageOracle",
]
