import numpy as np
import pytest

from tabular_nets.data import DataSet, DataSetError, MaxNormalizer, convert_wine_quality


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_create_from_file_reads_inputs_and_outputs(tmp_path) -> None:
    path = _write(tmp_path, "data.txt", "1,2,3\n4,5,6\n\n7,8,9\n")
    dataset = DataSet.create_from_file(path, 2, 1)
    assert len(dataset) == 3
    assert dataset.input_count == 2
    assert dataset.output_count == 1
    np.testing.assert_allclose(dataset.inputs, [[1, 2], [4, 5], [7, 8]])
    np.testing.assert_allclose(dataset.desired_outputs, [[3], [6], [9]])
    row = dataset.rows[1]
    np.testing.assert_allclose(row.input, [4, 5])
    np.testing.assert_allclose(row.desired_output, [6])


def test_create_from_file_skips_header_with_custom_delimiter(tmp_path) -> None:
    path = _write(tmp_path, "data.tsv", "a\tb\ty\n0.5\t1.5\t1\n2.5\t3.5\t0\n")
    dataset = DataSet.create_from_file(path, 2, 1, delimiter="\t", skip_header=True)
    assert dataset.column_names == ["a", "b", "y"]
    assert len(dataset) == 2
    np.testing.assert_allclose(dataset.inputs[1], [2.5, 3.5])


def test_create_from_file_reports_bad_rows(tmp_path) -> None:
    wrong_width = _write(tmp_path, "wide.txt", "1,2\n1,2,3\n")
    with pytest.raises(DataSetError, match=":2:"):
        DataSet.create_from_file(wrong_width, 1, 1)

    not_numeric = _write(tmp_path, "text.txt", "1,2\nx,3\n")
    with pytest.raises(DataSetError, match=":2:"):
        DataSet.create_from_file(not_numeric, 1, 1)

    with pytest.raises(DataSetError):
        DataSet.create_from_file(_write(tmp_path, "empty.txt", "\n\n"), 1, 1)

    with pytest.raises(FileNotFoundError):
        DataSet.create_from_file(tmp_path / "missing.txt", 1, 1)


def test_skip_header_uses_first_non_blank_line(tmp_path) -> None:
    path = _write(tmp_path, "padded.txt", "\n  \nx,y\n1,2\n\n3,4\n")
    dataset = DataSet.create_from_file(path, 1, 1, skip_header=True)
    assert dataset.column_names == ["x", "y"]
    np.testing.assert_allclose(dataset.inputs.ravel(), [1, 3])
    np.testing.assert_allclose(dataset.desired_outputs.ravel(), [2, 4])


def test_constructor_rejects_inputs_of_wrong_width() -> None:
    with pytest.raises(ValueError):
        DataSet(2, 0, inputs=np.arange(6.0).reshape(2, 3))
    with pytest.raises(ValueError):
        DataSet(2, 0, inputs=np.zeros((2, 2, 1)))


def test_constructor_requires_outputs_for_output_columns() -> None:
    with pytest.raises(ValueError):
        DataSet(2, 1, inputs=np.ones((5, 2)))

    unlabeled = DataSet(2, 0, inputs=np.ones((5, 2)))
    assert unlabeled.desired_outputs.shape == (5, 0)

    empty = DataSet(2, 1)
    assert len(empty) == 0
    assert empty.desired_outputs.shape == (0, 1)


def test_data_set_error_is_a_value_error() -> None:
    assert issubclass(DataSetError, ValueError)


def test_split_partitions_rows_reproducibly() -> None:
    inputs = np.arange(20, dtype=float).reshape(10, 2)
    outputs = np.arange(10, dtype=float).reshape(10, 1)
    dataset = DataSet(2, 1, inputs=inputs, desired_outputs=outputs)

    train, test = dataset.split(0.6, 0.4, seed=3)
    assert len(train) == 6
    assert len(test) == 4
    combined = sorted(np.concatenate([train.desired_outputs, test.desired_outputs]).ravel())
    assert combined == list(range(10))

    again, _ = dataset.split(0.6, 0.4, seed=3)
    np.testing.assert_allclose(train.inputs, again.inputs)
    np.testing.assert_allclose(dataset.inputs, inputs)


def test_split_without_shuffle_keeps_order() -> None:
    dataset = DataSet(1, 1, inputs=np.arange(5.0), desired_outputs=np.arange(5.0))
    first, second = dataset.split(0.4, 0.6, shuffle=False)
    np.testing.assert_allclose(first.inputs.ravel(), [0, 1])
    np.testing.assert_allclose(second.inputs.ravel(), [2, 3, 4])


@pytest.mark.parametrize("parts", [(0.5, 0.4), (1.2, -0.2), ()])
def test_split_rejects_invalid_fractions(parts) -> None:
    dataset = DataSet(1, 1, inputs=np.arange(4.0), desired_outputs=np.arange(4.0))
    with pytest.raises(ValueError):
        dataset.split(*parts)


def test_add_row_checks_widths() -> None:
    dataset = DataSet(2, 1)
    dataset.add_row([1.0, 2.0], [3.0])
    assert len(dataset) == 1
    with pytest.raises(ValueError):
        dataset.add_row([1.0], [3.0])
    with pytest.raises(ValueError):
        dataset.add_row([1.0, 2.0], [3.0, 4.0])


def test_copy_is_independent() -> None:
    dataset = DataSet(1, 1, inputs=[[1.0], [2.0]], desired_outputs=[[3.0], [4.0]])
    clone = dataset.copy()
    clone.inputs[0, 0] = 9.0
    assert dataset.inputs[0, 0] == 1.0
    assert len(clone) == 2


def test_max_normalizer_uses_training_maxima() -> None:
    train = DataSet(2, 1, inputs=[[2.0, 0.0], [4.0, 0.0]], desired_outputs=[[10.0], [5.0]])
    test = DataSet(2, 1, inputs=[[8.0, 3.0]], desired_outputs=[[20.0]])

    normalizer = MaxNormalizer(train)
    normalizer.normalize(train)
    normalizer.normalize(test)

    np.testing.assert_allclose(train.inputs, [[0.5, 0.0], [1.0, 0.0]])
    np.testing.assert_allclose(train.desired_outputs, [[1.0], [0.5]])
    np.testing.assert_allclose(test.inputs, [[2.0, 3.0]])
    np.testing.assert_allclose(test.desired_outputs, [[2.0]])
    np.testing.assert_allclose(normalizer.max_inputs, [4.0, 0.0])
    np.testing.assert_allclose(normalizer.denormalize_outputs([[0.5]]), [[5.0]])


def test_max_normalizer_rejects_other_shapes() -> None:
    normalizer = MaxNormalizer(DataSet(2, 1, inputs=[[1.0, 1.0]], desired_outputs=[[1.0]]))
    with pytest.raises(ValueError):
        normalizer.normalize(DataSet(1, 1, inputs=[[1.0]], desired_outputs=[[1.0]]))


def test_convert_wine_quality_writes_one_hot_rows(tmp_path) -> None:
    header = ";".join(f'"feature {i}"' for i in range(11)) + ';"quality"\n'
    rows = [
        ";".join(str(0.1 * i) for i in range(11)) + ";6\n",
        ";".join(str(1.0 + i) for i in range(11)) + ";3\n",
    ]
    source = _write(tmp_path, "winequality-white.csv", header + "".join(rows))
    destination = tmp_path / "out" / "wine.txt"

    assert convert_wine_quality(source, destination) == 2

    dataset = DataSet.create_from_file(destination, 11, 10, delimiter="\t", skip_header=True)
    assert len(dataset) == 2
    assert dataset.column_names[0] == "feature 0"
    assert int(np.argmax(dataset.desired_outputs[0])) == 5
    assert int(np.argmax(dataset.desired_outputs[1])) == 2
    assert dataset.desired_outputs.sum() == 2


def test_convert_wine_quality_rejects_out_of_range_quality(tmp_path) -> None:
    header = ";".join(f'"f{i}"' for i in range(11)) + ';"quality"\n'
    source = _write(tmp_path, "bad.csv", header + ";".join(["1"] * 11) + ";0\n")
    with pytest.raises(DataSetError):
        convert_wine_quality(source, tmp_path / "wine.txt")
