import asyncio
import inspect

import pytest


def pytest_configure(config):
    # Markers used by the test suite.
    config.addinivalue_line("markers", "asyncio: run the coroutine test on a fresh event loop")


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):
    """
    Run coroutine tests marked with @pytest.mark.asyncio on a fresh event loop.
    This hook is the project's asyncio runner; no async pytest plugin is needed.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None
    if not inspect.iscoroutinefunction(pyfuncitem.obj):
        return None

    # funcargs may hold autouse fixtures the test does not accept.
    argnames = pyfuncitem._fixtureinfo.argnames
    kwargs = {name: pyfuncitem.funcargs[name] for name in argnames}
    asyncio.run(pyfuncitem.obj(**kwargs))
    return True
