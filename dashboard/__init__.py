"""Dashboard package namespace.

This package contains the example Streamlit application and its modules.
Each module under ``components`` is a ``*_ui`` view builder plus a
``*_server`` behavior binder, composed by id through the ``scoping`` package.
"""
