# typetest

A small command-line typing test. It shows you a sentence and times how long
you take to type it back. It then reports your accuracy and words per minute.
Every result is added to `results.json` in the current directory, so you can
check your averages over time.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Run a typing test on a random number of words (one to five) from the
built-in list of fruit names:

```
typetest run
```

Choose how many words the sentence has. The built-in list holds 19 words, and
each word is used at most once per sentence:

```
typetest run 4
```

Take the words from an online random-word service instead of the built-in
list:

```
typetest run -a 6
```

Type a random quote fetched from an online quote service:

```
typetest run -q
```

After the prompt `Your sentence is: ...`, type the sentence and press Enter.
The program then prints three things:

- your accuracy as a percentage
- the time you took
- your words per minute, where one "word" counts as five characters of the
  reference sentence

If there is no sentence to type, the run is not recorded. The program prints
an error and exits with status 1. This happens in three cases:

- a word count of zero
- a word count larger than the built-in list
- an online service that fails or returns nothing

### Statistics

```
typetest total_runs   # number of recorded runs
typetest accuracy     # average accuracy over all runs
typetest wpm          # average words per minute over all runs
```

When no `results.json` exists yet, these commands report `-1`: `total_runs`
prints `-1` on its own, and `accuracy` and `wpm` print it after their label.

## Using it from Python

```python
from typetest.scoring import compare_accuracy, words_per_minute
from typetest.storage import ResultStore

accuracy = compare_accuracy("Apple Mango", "Apple Mangp") * 100
wpm = words_per_minute(6.0, len("Apple Mango") / 5)

store = ResultStore("results.json")
store.record(accuracy, wpm)
print(store.num_runs(), store.average_accuracy(), store.average_wpm())
```

Accuracy is measured against the length of the reference sentence. Each
mismatched character where the two strings overlap counts as a mistake. So
does each character by which their lengths differ.

Both functions reject bad input with `ValueError`:

- `compare_accuracy` raises it for an empty reference.
- `words_per_minute` raises it for an elapsed time of zero.

`typetest.sentences` holds the sentence sources:

- `generate_reference_string` picks from the built-in list.
- `generate_reference_string_api` and `generate_reference_quote` use the
  online services. Each returns an empty string when the request fails.

`typetest.cli.run_typing_test` runs one test. Its input function, its clock and
its result store can be swapped for your own.