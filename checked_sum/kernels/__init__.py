"""
Kernel layer.

- `checked_sum/kernels/specs/` contains kernel specs (.yaml): the named integer domains.
- `checked_sum/kernels/python/` contains the Python kernels implementing those semantics.
"""
