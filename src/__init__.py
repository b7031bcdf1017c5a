"""최저가 조회 서비스 (Google Shopping 기반)"""

__version__ = "1.0.0"
