import json
import os

from lint_refs.payload import load_payload

SAMPLES = os.path.join(os.path.dirname(__file__), "samples")


def sample_path(filename):
    return os.path.join(SAMPLES, filename)


def load_sample_data(filename):
    with open(sample_path(filename)) as f:
        return json.load(f)


def load_sample_payload(filename):
    return load_payload(sample_path(filename))
