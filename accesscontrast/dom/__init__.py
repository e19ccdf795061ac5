"""Read-only views of a rendered page.

``base`` defines the :class:`Document` protocol the checks consume;
``snapshot`` implements it over captured page data; ``playwright`` captures
that data from a live browser page.
"""
