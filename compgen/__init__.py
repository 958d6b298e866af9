"""Component Scaffold - UI 컴포넌트 스캐폴딩 도구"""

__version__ = "0.1.0"
