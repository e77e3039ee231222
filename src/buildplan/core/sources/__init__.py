from buildplan.core.sources.abc import SourceScanner
from buildplan.core.sources.fake import FakeSourceScanner
from buildplan.core.sources.real import RealSourceScanner

__all__ = [
    "FakeSourceScanner",
    "RealSourceScanner",
    "SourceScanner",
]
