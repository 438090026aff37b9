"""pushsource delivery routing.

``DeliveryDispatcher`` is the delivery sink the core hands each message
and its targets to.  It records a ``Delivery`` and offers it to the
attached sinks: local JSON files, push payload buffers, or anything else
with a ``sink_name`` and an ``accept`` method.
"""
