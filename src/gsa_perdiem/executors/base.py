"""
base.py
-------
Defines the BaseExecutor interface the host runner calls once per invocation.
Executors keep no state between calls; anything an invocation needs arrives
in params (user selections) or context (host data such as stored credentials).
"""
class BaseExecutor:
    def execute(self, params: dict, context: dict) -> dict:
        """
        params: resource/operation selection and string inputs, or a raw request
        context: may hold {"credentials": {<credential name>: {...}}}
        Returns: dict with result data
        """
        raise NotImplementedError
