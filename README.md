# sparsegrb

Sparse matrices and vectors with GraphBLAS-style operations. Containers
store only the entries that have been set. Around them the package
provides masks and complement views, lazy transform views, multiplication
over any semiring, and permutation. It is pure Python and has no
dependencies.

## Installation

```
pip install .
```

## Containers (`sparsegrb.containers`)

`Matrix(shape, hint=Hint.SPARSE)` and `Vector(shape, hint=Hint.DENSE)`
hold `(index, value)` entries. A matrix index is an `Index`, a vector
index is an `int`.

```python
from sparsegrb.containers import Matrix, Vector

m = Matrix((4, 4))
m[1, 2] = 12.0             # store or overwrite
m.insert((0, 3), 5.0)      # returns False and changes nothing if (0, 3) is stored
m.insert_or_assign((0, 3), 6.0)  # returns True only if the entry is new
len(m)                     # number of stored values
m.find((1, 2))             # (Index(1, 2), 12.0), or None if nothing is stored
(1, 2) in m                # True
for index, value in m:
    i, j = index

v = Vector(4)
v[2] = 1.0
```

- A `Matrix` with the sparse hint is iterated in row-major order; with any
  other hint, in insertion order. A `Vector` is always iterated in index
  order.
- Reading or writing an index outside the shape raises `IndexError`;
  reading an index with nothing stored raises `KeyError`.
- `update(entries)` inserts `(key, value)` pairs and leaves existing
  entries alone, `apply(fn)` replaces every stored value `v` with `fn(v)`,
  `reshape(shape)` changes the shape and drops entries that fall outside
  it, `clear()` removes every entry, and `empty()` tells whether nothing is
  stored.
- `Hint` lists the storage hints `SPARSE`, `DENSE`, `ROW`, `COLUMN` and
  `COORDINATE`. `pick_ewise_hint(a, b)` returns `Hint.DENSE` if either
  argument (a hint or a container) is dense, and `Hint.SPARSE` otherwise.

## Indices (`sparsegrb.index`)

`Index(i, j)` or `Index((i, j))` is an immutable (row, column) pair that
compares and hashes like a tuple. `index[0]` is the row, and any other
subscript gives the column. The components are also available as `first`
and `second`.

## Operators and semirings (`sparsegrb.ops`)

A `BinaryOp` is callable on two operands. `identity(kind)` gives its
identity element for values of type `kind`, or raises `TypeError` if it
has none, and `is_monoid()` tells whether it has one.

| Operator | Result | Identity |
|---|---|---|
| `plus` | `a + b` | `kind(0)` |
| `minus` | `a - b` | none |
| `multiplies` (also `times`) | `a * b` | `kind(1)` |
| `divides` | `a / b`; two integers divide truncating toward zero | none |
| `modulus` | remainder with the sign of `a` | none |
| `maximum` | the greater value, `a` on a tie | `-inf` (`False` for `bool`) |
| `minimum` | the lesser value, `a` on a tie | `inf` (`True` for `bool`) |
| `logical_and`, `logical_or`, `logical_xor` | boolean result | `True`, `False`, `False` |
| `logical_xnor` | boolean result | none |

The module also has the plain functions `negate`, `logical_not`,
`take_left`, `take_right`, and the entry predicates `lower_triangle` and
`upper_triangle`. Each predicate takes an `(index, value)` entry and is
true strictly below or strictly above the diagonal.

`make_semiring(reduce, combine)` builds a `Semiring` with `reduce(a, b)`
and `combine(a, b)` methods. Ready-made semirings are `plus_times`
(`plus_multiplies`), `min_plus`, `max_plus`, `min_times`, `min_max`,
`max_min`, `max_times`, `plus_min`, `lor_land`, `land_lor`, `lxor_land`
and `lxnor_lor`.

## Views (`sparsegrb.views`, `sparsegrb.transform`)

- `complement_view(container)` returns a `ComplementVectorView` or a
  `ComplementMatrixView`. The view holds `True` at every index within the
  shape where the container stores nothing or stores a false value.
- `FullMatrix(shape=None, value=0)` holds `value` at every index of its
  shape. Without a shape it is unbounded. `FullMatrixMask` stores `True`
  everywhere and `EmptyMatrixMask` stores `False` everywhere.
- `SubmatrixView(matrix, rows, columns)` shows the entries whose row lies
  in `[rows[0], rows[1])` and whose column lies in
  `[columns[0], columns[1])`. Each entry keeps its original index.
- `transform(container, fn)` returns a `TransformMatrixView` or a
  `TransformVectorView` whose values are `fn((index, value))` for each
  stored entry. `structure(container)` is the same view with `True` for
  every value. `indices(container)` and `values(container)` are generators
  over the stored indices and values.

Every view supports `len()`, iteration, `in` and `find(key)`, and can be
used as a mask.

## Algorithms (`sparsegrb.algorithms`)

```python
from sparsegrb.algorithms import multiply, permute
from sparsegrb.ops import minimum, plus
from sparsegrb.views import complement_view

y = multiply(m, v)                          # matrix times vector: a Vector
c = multiply(m, m)                          # matrix times matrix: a Matrix
d = multiply(m, v, minimum, plus)           # min-plus semiring
z = multiply(m, v, mask=complement_view(v)) # only where v has no true value
p = permute(m, [3, 2, 1, 0])                # o[i, j] = m[p[i], p[j]]
```

`multiply(a, b, reduce=plus, combine=multiplies, mask=None)` handles four
cases:

- matrix × vector and vector × matrix give a `Vector`;
- matrix × matrix gives a `Matrix`;
- vector × vector gives a scalar. This case needs a `reduce` operator
  with an identity and accepts no mask.

A result entry is produced only where the mask, if one is given, stores a
true value.

`permute(matrix, permutation, column_permutation=None)` applies one
permutation to both rows and columns, or two separate ones. A permutation
entry outside the matrix dimension raises `IndexError`.

## Utilities (`sparsegrb.util`, `sparsegrb.kernels`)

- `format_container(container, label="")` returns a header line followed
  by one `(i, j): value` or `(i): value` line per stored entry.
  `print_container(container, label="", file=None)` writes that text to
  standard output or to `file`.
- `generate_random_matrix(shape, density=0.01, seed=0, kind=float)`
  returns a sparse `Matrix` with `int(density * m * n)` randomly placed
  values. `generate_random_vector(shape, density=0.01, seed=None,
  kind=float)` does the same for a `Vector`. A float value is uniform in
  [0, 1); a value of any other kind is 0 or 1. A density outside [0, 1]
  raises `ValueError`.
- `sparsegrb.kernels` has the following:
  - `sumreduce`, the sum of the stored values of a matrix or of
    `(i, j, value)` triples;
  - `spmm(a, b, c, n_vecs)`, which accumulates a sparse matrix times a
    row-major dense block into `c` in place;
  - `median` and `mean`;
  - `benchmark_sumreduce` and `benchmark_spmm`. These time several
    trials, print the median and mean in milliseconds, and return a
    `BenchmarkResult` with the per-trial durations and sums.

## What the package does not do

- It does not read or write matrix files. Matrices are built in code or
  with the random generators.
- It has no element-wise union or intersection and no assignment or
  reduction between containers. `multiply` and `permute` are its only
  algorithms.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```