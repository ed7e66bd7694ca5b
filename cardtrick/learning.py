"""
Classes to train an ML model to guess the hidden card by watching the trick.

The model never sees the encoding table. It is shown the order of the three
code cards and the offset that order stood for, and has to learn the code.
"""

import argparse
import logging
import pickle
import random
from threading import Lock, Thread
from typing import Optional, Sequence, Tuple

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from cardtrick.card import Card, get_hand
from cardtrick.constants import CODE_LENGTH, N_RANKS
from cardtrick.encoder import encode
from cardtrick.errors import InvalidPermutation
from cardtrick.ordering import rank_key

# The number of elements in a serialized code sequence
FEATURE_LENGTH = 3


def featurize(code_cards: Sequence[Card]) -> np.ndarray:
    """
    Serialize the order of `code_cards` as pairwise comparisons: whether the
    first is below the second, the first below the third, and the second
    below the third.
    """
    if len(code_cards) != CODE_LENGTH:
        raise InvalidPermutation(
            'Expected {0} code cards, not {1}'.format(CODE_LENGTH,
                                                      len(code_cards))
        )
    k = [rank_key(c) for c in code_cards]
    return np.array([k[0] < k[1], k[0] < k[2], k[1] < k[2]], dtype=np.int8)


class Model:
    def __init__(self, model: Optional[DecisionTreeClassifier] = None):
        """
        Parameters
        ----------
        model : DecisionTreeClassifier
            The model to use to guess offsets. If None, create a new
            untrained `DecisionTreeClassifier`.
        """
        if model is None:
            self.model = DecisionTreeClassifier(random_state=0)
        else:
            self.model = model
        self._training_lock = Lock()
        self._x = np.ndarray((0, FEATURE_LENGTH), dtype=np.int8)
        self._y = np.ndarray((0,), dtype=np.int64)

    def train(self, x_values: np.ndarray, y_values: np.ndarray) -> None:
        """
        Add the examples to everything seen so far and refit the model.
        """
        with self._training_lock:
            self._x = np.vstack([self._x, x_values])
            self._y = np.concatenate([self._y, y_values])
            self.model.fit(self._x, self._y)

    @property
    def n_examples(self) -> int:
        return len(self._y)

    def predict_offset(self, code_cards: Sequence[Card]) -> int:
        return int(self.model.predict(np.array([featurize(code_cards)]))[0])

    def guess(self, indicator: Card, code_cards: Sequence[Card]) -> Card:
        """ Guess the hidden `Card` with the learned offset. """
        offset = self.predict_offset(code_cards)
        return Card((indicator.rank.value + offset - 1) % N_RANKS + 1,
                    indicator.suit)

    def run_n_iterations(self, n: int, rng: random.Random) -> None:
        """
        Watch `n` tricks and train on them.

        Parameters
        ----------
        n : int
            The number of tricks to watch
        """
        x_values, y_values = generate_examples(n, rng)
        self.train(x_values, y_values)
        logging.getLogger(__name__).info(
            'Trained on {0} tricks'.format(self.n_examples)
        )

    def to_file(self, filename: str) -> None:
        """
        Write a `Model` to a file.

        Parameters
        ----------
        filename : str
            The location of the output file
        """
        logging.getLogger(__name__).info(
            'Writing model to {0}'.format(filename)
        )
        with open(filename, 'wb') as file:
            pickle.dump(self.model, file)


def generate_examples(n: int,
                      rng: random.Random) -> Tuple[np.ndarray, np.ndarray]:
    """
    Perform the trick on `n` random hands. Return the serialized code
    sequences and the offset each of them encodes.
    """
    x_values = np.ndarray((n, FEATURE_LENGTH), dtype=np.int8)
    y_values = np.ndarray((n,), dtype=np.int64)
    for i in range(n):
        arrangement = encode(get_hand(rng))
        x_values[i] = featurize(arrangement.code_cards)
        y_values[i] = arrangement.offset
    return x_values, y_values


def accuracy(model: Model, n: int, rng: random.Random) -> float:
    """
    Return the fraction of `n` random tricks for which `model` names the
    hidden `Card`.
    """
    if n < 1:
        raise ValueError('Accuracy needs at least one trick')
    correct = 0
    for _ in range(n):
        arrangement = encode(get_hand(rng))
        guess = model.guess(arrangement.indicator, arrangement.code_cards)
        correct += guess == arrangement.hidden
    return correct / n


def model_from_file(filename: Optional[str]) -> Model:
    """
    Return a `Model` object from a pickled `DecisionTreeClassifier`.

    Parameters
    ----------
    filename : Optional[str]
        The location of the pickled classifier
    """
    input_model = None
    if filename:
        logging.getLogger(__name__).info(
            'Reading model from {0}'.format(filename)
        )
        with open(filename, 'rb') as file:
            input_model = pickle.load(file)

    return Model(input_model)


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument('--n',
                        type=int,
                        help='The number of tricks to train on')
    parser.add_argument('--input',
                        type=str,
                        help='The model to evaluate instead of training')
    parser.add_argument('--output',
                        type=str,
                        help='The file to write the trained model to')
    parser.add_argument('--cores',
                        type=int,
                        help='The number of threads to deal tricks in',
                        default=1)
    parser.add_argument('--seed',
                        type=int,
                        help='Seed for dealing hands',
                        default=None)
    parser.add_argument('--evaluate',
                        type=int,
                        help='The number of tricks to measure accuracy on',
                        default=1000)
    return parser


def main():
    log_format = '[%(asctime)s %(threadName)s, %(levelname)s] %(message)s'
    logging.basicConfig(level=logging.INFO, format=log_format)
    parser = setup_parser()
    args = parser.parse_args()
    if args.cores < 1:
        raise ValueError('The number of cores must be at least 1')
    if args.evaluate < 1:
        raise ValueError('The number of evaluation tricks must be at least 1')
    seeder = random.Random(args.seed)

    if args.input is not None:
        m = model_from_file(filename=args.input)
    else:
        if args.n is None:
            return
        if args.n % args.cores != 0:
            raise ValueError(
                'The number of cores must evenly divide total iterations'
            )
        m = Model()
        threads = [
            Thread(name='t{0}'.format(i),
                   target=m.run_n_iterations,
                   kwargs={
                       'n': args.n // args.cores,
                       'rng': random.Random(seeder.random())
                   })
            for i in range(args.cores)
        ]
        logging.getLogger(__name__).info(
            'Starting {0} threads'.format(args.cores)
        )
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        if args.output:
            m.to_file(args.output)

    logging.getLogger(__name__).info('Accuracy: {0:.3f}'.format(
        accuracy(m, args.evaluate, random.Random(seeder.random()))
    ))


if __name__ == '__main__':
    main()
