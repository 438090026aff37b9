"""pushsource core: gate, normalize, resolve targets, dispatch.

Everything here is synchronous and free of shared mutable state; host
lookups come in through the protocols in ``pushsource.core.protocols``.
"""
