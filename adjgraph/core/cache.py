import numpy as np
import scipy.sparse as sp


class CacheManager:
    """Cache manager for materialized adjacency matrices (CSR/CSC)."""

    def __init__(self, graph):
        self._G = graph
        self._csr = None
        self._csc = None
        self._csr_version = None
        self._csc_version = None

    def _build_csr(self):
        n = self._G.vertex_count()
        rows, cols = self._G._edge_arrays()
        data = np.ones(len(rows), dtype=np.int8)
        return sp.csr_matrix((data, (rows, cols)), shape=(n, n))

    # ==================== CSR/CSC Properties ====================

    @property
    def csr(self):
        """Get CSR (Compressed Sparse Row) adjacency.
        Entry (v, w) is 1 iff the edge v -> w exists. Builds and caches on first access.
        """
        if self._csr is None or self._csr_version != self._G._state.version:
            self._csr = self._build_csr()
            self._csr_version = self._G._state.version
        return self._csr

    @property
    def csc(self):
        """Get CSC (Compressed Sparse Column) adjacency.
        Builds and caches on first access.
        """
        if self._csc is None or self._csc_version != self._G._state.version:
            self._csc = self.csr.tocsc()
            self._csc_version = self._G._state.version
        return self._csc

    def has_csr(self) -> bool:
        """True if CSR cache exists and matches current graph version."""
        return self._csr is not None and self._csr_version == self._G._state.version

    def has_csc(self) -> bool:
        """True if CSC cache exists and matches current graph version."""
        return self._csc is not None and self._csc_version == self._G._state.version

    # ==================== Cache Management ====================

    def invalidate(self, formats=None):
        """Invalidate cached formats.

        Parameters
        ----------
        formats : list[str], optional
            Formats to invalidate ('csr', 'csc').
            If None, invalidate all.

        """
        if formats is None:
            formats = ["csr", "csc"]

        for fmt in formats:
            if fmt == "csr":
                self._csr = None
                self._csr_version = None
            elif fmt == "csc":
                self._csc = None
                self._csc_version = None
            else:
                raise ValueError(f"Unknown cache format {fmt!r}")

    def build(self, formats=None):
        """Pre-build specified formats (eager caching)."""
        if formats is None:
            formats = ["csr", "csc"]

        for fmt in formats:
            if fmt == "csr":
                _ = self.csr
            elif fmt == "csc":
                _ = self.csc
            else:
                raise ValueError(f"Unknown cache format {fmt!r}")

    def clear(self):
        """Clear all caches."""
        self.invalidate()

    def info(self):
        """Get cache status and memory usage.

        Returns
        -------
        dict
            Status of each cached format

        """

        def _format_info(matrix, version):
            if matrix is None:
                return {"cached": False}

            size_bytes = matrix.data.nbytes + matrix.indices.nbytes + matrix.indptr.nbytes
            return {
                "cached": True,
                "version": version,
                "size_mb": size_bytes / (1024**2),
                "nnz": matrix.nnz,
                "shape": matrix.shape,
            }

        return {
            "csr": _format_info(self._csr, self._csr_version),
            "csc": _format_info(self._csc, self._csc_version),
        }
