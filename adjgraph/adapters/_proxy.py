class BackendProxy:
    def __init__(self, graph, backend_name):
        self._graph = graph
        self._backend_name = backend_name

    def __getattr__(self, name):
        from .manager import ensure_materialized

        backend = ensure_materialized(self._backend_name, self._graph)
        # Try backend-level function (e.g., networkx.descendants)
        fn = getattr(backend["module"], name, None)
        if callable(fn):

            def wrapped(*args, **kwargs):
                return fn(backend["graph"], *args, **kwargs)

            return wrapped

        # Otherwise forward attribute to the backend graph itself
        return getattr(backend["graph"], name)
