"""dataproxy_bench: walks every page of a dataproxy request and reports timings.

Modules are flat under ``src``; the command line lives in ``cli``.
"""
