"""appbuilder - lint, bundle, minify and post-process a web app.

Tasks described in AppBuilder.json are built in order; generated JS and
CSS are referenced from the HTML with subresource-integrity hashes.
"""

__version__ = "1.0.0"
