# emotionnlp

Detect emotions in short pieces of text. The package does three things:

1. It turns raw text into a TF-IDF feature vector.
2. It passes the vector to a classifier that you supply.
3. It maps the classifier's scores onto emotion labels.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`emotionnlp.config` reads settings from JSON files.

### NLP settings

The NLP settings look like this:

```json
{
  "vocab_path": "model/vocab.txt",
  "idf_path": "model/idf.txt",
  "model_path": "model/emotion_classifier.onnx",
  "labels": ["joy", "sadness", "anger"]
}
```

`read_nlp_config(path)` returns a frozen `NLPConfig` with these fields:

- `vocab_path`
- `idf_path`
- `model_path`
- `labels`

It raises an error in these cases:

- `FileNotFoundError` if the file does not exist.
- `KeyError` if a key is missing.
- `TypeError` if a path is not a string.
- `TypeError` if `labels` is not a list of strings.

```python
from emotionnlp.config import read_nlp_config

cfg = read_nlp_config("config/config.json")
print(cfg.labels)
```

### Server settings

`read_server_config(path)` reads a file with `host` and `port`. Both values must be strings, for example `{"host": "0.0.0.0", "port": "50051"}`.

It returns a frozen `ServerConfig` with:

- `host`, a string.
- `port`, an integer.

The port is read as follows:

- It is read from the leading integer of the string, after any whitespace.
- It is reduced modulo 65536.
- A string that does not start with a number raises `ValueError`.
- A number outside the 32-bit signed range also raises `ValueError`.

## Preprocessing

`ClassicalPreprocessor(vocab_file, idf_file)` loads two files.

**The vocabulary file** holds one token or bigram per line. Blank lines are skipped, and each remaining line gets the next index.

**The IDF file** holds whitespace-separated weights, one for each vocabulary entry. Reading stops at the first value that is not a number.

Text is processed in these steps:

1. ASCII letters are lowercased.
2. ASCII punctuation is removed, except `!` and `?`.
3. The text is split on whitespace.
4. Common English stopwords are dropped. The set is in `emotionnlp.preprocessing.STOPWORDS`.
5. Tokens longer than three characters lose one suffix, if they have one. The suffixes are listed in `SUFFIXES`, and the longest match is tried first. A suffix is removed only when at least two characters would remain.

```python
from emotionnlp.preprocessing import ClassicalPreprocessor

prep = ClassicalPreprocessor("vocab.txt", "idf.txt")
prep.preprocess_to_string("Hello WORLD, what a nice day!")
# 'hello world what nice day!'

vector = prep.preprocess_to_vector("I am very happy today!")
```

### Feature vectors

`preprocess_to_vector` builds its terms from the processed tokens plus their adjacent bigrams. For each term found in the vocabulary, the value is:

```
(count of that term / total number of terms) * idf weight
```

The result is a `float32` numpy vector as long as the vocabulary. It is all zeros in these cases:

- None of the terms are known.
- The vocabulary is empty.
- The vocabulary and IDF sizes differ.

`Preprocessor` is the abstract base class. It declares `preprocess_to_string` and `preprocess_to_vector`.

## Labels and normalisation

```python
from emotionnlp.labels import LabelMapper
from emotionnlp.normalization import softmax

mapper = LabelMapper(["joy", "sadness", "anger"])
mapper.map([0.1, 0.7, 0.2])
# {'joy': 0.1, 'sadness': 0.7, 'anger': 0.2}

softmax([1.0, 2.0, 3.0])  # float32 numpy array summing to 1
```

`LabelMapper.map` raises `ValueError` when the number of scores differs from the number of labels.

`softmax` of an empty input returns an empty array.

## Pipeline

`NLPPipeline(vocab_file, idf_file, model_path, labels, model)` chains three parts:

1. A `ClassicalPreprocessor`.
2. The given `Model`.
3. A `LabelMapper`.

The constructor calls `model.load(model_path)`.

`Model` is an abstract base class with two methods:

- `load(path)`
- `predict(vector)`, which returns one score per label.

```python
import numpy as np
from emotionnlp.pipeline import Model, NLPPipeline

class ConstantModel(Model):
    def load(self, path):
        self.path = path

    def predict(self, vector):
        return [0.2, 0.5, 0.3]

pipeline = NLPPipeline("vocab.txt", "idf.txt", "model.bin",
                       ["joy", "sadness", "anger"], ConstantModel())
pipeline.run("I am very happy today!")
# {'joy': 0.2, 'sadness': 0.5, 'anger': 0.3}
```

`run(text)` returns the model's scores as they are, keyed by label. Softmax is not applied. An empty string raises `ValueError`.

## What this package does not do

- **No classifier.** The package has no trained model and no model runtime. You must supply a `Model` implementation that loads and runs your classifier.
- **No network service.** The package has no server and no command-line program. `read_server_config` only reads the settings such a server would use.