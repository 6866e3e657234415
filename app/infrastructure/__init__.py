"""Infrastructure modules for the i18n toolkit.

Centralized infrastructure components:
- i18n: Internationalization (translation, number and date formatting)
"""
