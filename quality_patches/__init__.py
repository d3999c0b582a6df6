"""Apply Magento quality patches after composer install/update"""

__version__ = "1.0.0"
