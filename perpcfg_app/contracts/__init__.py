"""
Contract access module.

Minimal ABI fragments for the administrative functions this tool calls
and a gateway that reads state, encodes calls and sends transactions.
"""
