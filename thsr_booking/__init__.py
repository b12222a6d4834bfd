"""高鐵網路訂票自動化工具"""

__version__ = "0.3.0"
