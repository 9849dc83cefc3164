"""Chat gateway between a web client and a generative text service.

Short imperative messages ("открой задачи", "создай задачу купить молоко")
are recognised locally and answered with a synthetic stream. Everything else
is delegated to the generative service, whose streamed answer is filtered for
embedded ``<clawdos>`` directive blocks that are executed against the
application backend once the stream ends. Inbound traffic is rate-limited per
client and the upstream is guarded by a circuit breaker.
"""
