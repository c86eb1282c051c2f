__version__ = '0.1.0'
__short_version__ = '0.1'

# pylint: disable-msg=invalid-name
version = f"TriangleView v{__version__}"
'''A friendly version string for this build of TriangleView.'''
