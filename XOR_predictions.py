import numpy as np

from neuralnet.activations import HyperbolicTangent
from neuralnet.datasets import Labeled
from neuralnet.estimators import MultilayerPerceptron
from neuralnet.layers import Activation, Dense
from neuralnet.optimizer import Adam


def generate_xor_data(n):
    combos = np.array([list(map(int, format(i, f'0{n}b'))) for i in range(2**n)])
    labels = (np.sum(combos, axis=1) % 2).tolist()  # odd parity = 1
    return Labeled(combos, labels)


def test(n, n_hidden, lr, epochs):
    dataset = generate_xor_data(n)

    model = MultilayerPerceptron(
        hidden_layers=[Dense(n_hidden), Activation(HyperbolicTangent())],
        batch_size=2**n,
        optimizer=Adam(lr=lr),
        epochs=epochs,
        holdout=0.0,
        seed=0,
        verbose=0,
    )

    model.fit(dataset)

    preds = model.predict(dataset)

    print(f"Predicting XOR for {n} inputs:")
    print(f"XOR-{n} Predictions:", preds)
    print(f"Accuracy: {model.score(dataset) * 100:.2f}%")


if __name__ == "__main__":
    test(n=2, n_hidden=4, lr=0.05, epochs=2_000)
    test(n=3, n_hidden=8, lr=0.05, epochs=2_000)
    test(n=4, n_hidden=16, lr=0.02, epochs=3_000)
    test(n=5, n_hidden=32, lr=0.02, epochs=3_000)
