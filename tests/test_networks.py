import numpy as np
import pytest

torch = pytest.importorskip("torch")

from tabular_nets.learning import LMS, BackPropagation, MomentumBackpropagation
from tabular_nets.nets import (
    Adaline,
    AdalineConfig,
    MultiLayerPerceptron,
    MultiLayerPerceptronConfig,
    load_network,
)


def test_adaline_is_a_single_linear_output() -> None:
    network = Adaline(3, device="cpu")
    assert network.input_count == 3
    assert network.output_count == 1
    assert isinstance(network.learning_rule, LMS)
    with torch.no_grad():
        network.linear.weight.copy_(torch.tensor([[1.0, -2.0, 0.5]]))
        network.linear.bias.fill_(0.25)
    np.testing.assert_allclose(network.calculate([1.0, 1.0, 2.0]), [0.25], atol=1e-6)


def test_multilayer_perceptron_layers_and_sigmoid_range() -> None:
    torch.manual_seed(0)
    network = MultiLayerPerceptron(4, 6, 5, 3, device="cpu")
    assert network.layer_sizes == (4, 6, 5, 3)
    assert isinstance(network.learning_rule, BackPropagation)
    linear_layers = [module for module in network.layers if isinstance(module, torch.nn.Linear)]
    assert [layer.out_features for layer in linear_layers] == [6, 5, 3]

    outputs = network.predict(np.random.default_rng(0).normal(size=(7, 4)))
    assert outputs.shape == (7, 3)
    assert np.all((outputs > 0.0) & (outputs < 1.0))


def test_predict_rejects_wrong_width() -> None:
    network = MultiLayerPerceptron(2, 3, 1, device="cpu")
    with pytest.raises(ValueError):
        network.predict(np.zeros((2, 3)))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"layer_sizes": (3,)},
        {"layer_sizes": (3, 0, 1)},
        {"layer_sizes": (3, 1), "transfer": "softsign"},
    ],
)
def test_perceptron_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        MultiLayerPerceptronConfig(**kwargs)


def test_adaline_config_validation() -> None:
    with pytest.raises(ValueError):
        AdalineConfig(input_count=0)


def test_save_and_load_round_trip(tmp_path) -> None:
    torch.manual_seed(1)
    network = MultiLayerPerceptron(3, 4, 2, transfer="tanh", device="cpu")
    network.set_learning_rule(MomentumBackpropagation(momentum=0.5, learning_rate=0.2, max_iterations=7))
    path = tmp_path / "nested" / "nn1.nnet"
    network.save(path)
    assert path.exists()

    restored = load_network(path, device="cpu")
    assert isinstance(restored, MultiLayerPerceptron)
    assert restored.config == network.config
    rule = restored.learning_rule
    assert isinstance(rule, MomentumBackpropagation)
    assert rule.momentum == pytest.approx(0.5)
    assert rule.learning_rate == pytest.approx(0.2)
    assert rule.max_iterations == 7

    batch = np.linspace(-1.0, 1.0, 9).reshape(3, 3)
    np.testing.assert_allclose(restored.predict(batch), network.predict(batch), atol=1e-6)


def test_load_adaline(tmp_path) -> None:
    network = Adaline(2, device="cpu")
    path = tmp_path / "adaline.nnet"
    network.save(path)
    restored = load_network(path, device="cpu")
    assert isinstance(restored, Adaline)
    assert isinstance(restored.learning_rule, LMS)


def test_load_network_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_network(tmp_path / "missing.nnet")
    path = tmp_path / "unknown.nnet"
    torch.save({"network": "Hopfield", "config": {}, "state_dict": {}}, path)
    with pytest.raises(ValueError):
        load_network(path)
