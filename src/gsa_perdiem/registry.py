"""
registry.py
-----------
Executor registry the host runner resolves executors from.
Registers the generic HTTP executor and loads every module in executors/ that
exposes a register() hook, which is how the GSA Per Diem connector plugs in.
"""

import importlib
import logging
import os

logger = logging.getLogger(__name__)


EXECUTOR_REGISTRY = {}


def register_executor(name, executor_cls):
    EXECUTOR_REGISTRY[name] = executor_cls


def _register_builtin_executors():
    from .executors.http_exec import HTTPExecutor

    register_executor("http", HTTPExecutor)


_register_builtin_executors()


def load_executor_plugins():
    exec_dir = os.path.join(os.path.dirname(__file__), "executors")
    for fname in sorted(os.listdir(exec_dir)):
        if fname.endswith(".py") and not fname.startswith("__"):
            modname = f"{__package__}.executors.{fname[:-3]}"
            mod = importlib.import_module(modname)
            if hasattr(mod, "register"):
                mod.register(register_executor)
                logger.debug("Loaded executor plugin %s", modname)


load_executor_plugins()


def get_executor(executor_name):
    if executor_name in EXECUTOR_REGISTRY:
        return EXECUTOR_REGISTRY[executor_name]()
    raise ValueError(f"Unknown executor: {executor_name}")
