import pytest

from dsdrills.sparse import MatrixTerm, SparseMatrix, main, parse_sparse

A_TERMS = [(1, 2, 2), (2, 3, 1), (3, 2, 2), (4, 1, 1)]
B_TERMS = [(1, 1, 1), (1, 2, 1), (1, 3, 4), (2, 1, 3), (2, 2, 2), (2, 3, 3), (3, 4, 5)]


def _a():
    return SparseMatrix(4, 3, A_TERMS)


def _b():
    return SparseMatrix(3, 4, B_TERMS)


def _identity(n):
    return SparseMatrix(n, n, [(i, i, 1) for i in range(1, n + 1)])


def test_terms_are_kept_in_order():
    assert _a().terms == [MatrixTerm(*t) for t in A_TERMS]


def test_to_rows_places_terms():
    rows = _b().to_rows()
    for row, col, value in B_TERMS:
        assert rows[row - 1][col - 1] == value
    assert sum(1 for r in rows for v in r if v != 0) == len(B_TERMS)


def test_transpose_matches_dense_transpose():
    b = _b()
    assert b.transpose().to_rows() == [list(col) for col in zip(*b.to_rows())]
    t = b.transpose()
    assert [(x.row, x.col) for x in t.terms] == sorted((x.row, x.col) for x in t.terms)


def test_transpose_round_trip():
    b = _b()
    assert b.transpose().transpose().terms == b.terms


def test_product_transpose_identity():
    a, b = _a(), _b()
    left = (a @ b).transpose()
    right = b.transpose() @ a.transpose()
    assert left.to_rows() == right.to_rows()
    assert (left.rows, left.cols) == (4, 4)


def test_identity_multiplication():
    a = _a()
    assert (a @ _identity(3)).terms == a.terms
    assert (_identity(4) @ a).terms == a.terms


def test_product_leaves_operands_unchanged():
    a, b = _a(), _b()
    a @ b
    assert a.terms == _a().terms
    assert b.terms == _b().terms


def test_zero_sums_are_not_stored():
    row = SparseMatrix(1, 2, [(1, 1, 1), (1, 2, -1)])
    column = SparseMatrix(2, 1, [(1, 1, 1), (2, 1, 1)])
    product = row @ column
    assert product.terms == []
    assert product.to_rows() == [[0]]


def test_shape_mismatch():
    with pytest.raises(ValueError):
        _a() @ _a()


def test_out_of_order_term_rejected():
    matrix = SparseMatrix(3, 3, [(2, 2, 1)])
    with pytest.raises(ValueError):
        matrix.add_term(1, 3, 4)
    with pytest.raises(ValueError):
        matrix.add_term(2, 2, 4)


def test_out_of_range_term_rejected():
    with pytest.raises(IndexError):
        SparseMatrix(2, 2).add_term(3, 1, 1)
    with pytest.raises(IndexError):
        SparseMatrix(2, 2).add_term(1, 0, 1)


def test_format_matrix_layout():
    matrix = SparseMatrix(2, 2, [(1, 2, 5)])
    assert matrix.format_matrix() == "0 5 \n0 0 "


def test_format_terms_layout():
    matrix = SparseMatrix(2, 2, [(1, 2, 5), (2, 1, 7)])
    assert matrix.format_terms() == "1 2 5\n2 1 7"


def test_parse_two_matrices_from_one_stream():
    text = "4 3 4 1 2 2 2 3 1 3 2 2 4 1 1  3 4 7 1 1 1 1 2 1 1 3 4 2 1 3 2 2 2 2 3 3 3 4 5"
    stream = iter(text.split())
    a, b = parse_sparse(stream), parse_sparse(stream)
    assert a.terms == _a().terms
    assert b.terms == _b().terms


def test_parse_truncated_input():
    with pytest.raises(ValueError):
        parse_sparse("2 2 1 1 1".split())


def test_main_builtin_example(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Matrix a*b:\n" + (_a() @ _b()).format_matrix() in out


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "matrices.txt"
    path.write_text("2 2 1\n1 2 5\n2 2 2\n1 1 1\n2 2 1\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    expected = SparseMatrix(2, 2, [(1, 2, 5)]).format_matrix()
    assert "Matrix a*b:\n" + expected in out


def test_main_reports_mismatch(tmp_path, capsys):
    path = tmp_path / "matrices.txt"
    path.write_text("2 3 0\n2 3 0\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""