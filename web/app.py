"""
Language N-gram Model Inspection API

A Flask application for building the n-gram models of a language from
posted text and inspecting their frequencies and back-off chains.
"""

import threading
from typing import Dict, List

from flask import Flask, jsonify, request

from langngram import Language, MAX_ORDER, TrainingDataLanguageModel
from langngram.corpus import split_text_into_lines, split_text_into_words
from langngram.model import TestDataLanguageModel
from langngram.training import build_language_models


app = Flask(__name__)
app.config['MAX_TOP_K'] = 100

# Trained models by order, replaced as a whole on every training request
models: Dict[int, TrainingDataLanguageModel] = {}
models_lock = threading.Lock()


def _bad_request(message: str):
    return jsonify({'error': message}), 400


def _parse_order(value, default: int = MAX_ORDER) -> int:
    if value is None:
        return default
    try:
        order = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid order: {value!r}") from None
    if not 1 <= order <= MAX_ORDER:
        raise ValueError(f"Order must be between 1 and {MAX_ORDER}, got {order}")
    return order


def _current_models() -> List[TrainingDataLanguageModel]:
    with models_lock:
        return [models[order] for order in sorted(models)]


@app.errorhandler(ValueError)
def handle_value_error(error):
    return _bad_request(str(error))


@app.route('/api/languages')
def api_languages():
    """List supported languages."""
    return jsonify([
        {'name': lang.name.title(), 'iso_code': lang.iso_code, 'alphabet': lang.alphabet.name}
        for lang in Language
    ])


@app.route('/api/train', methods=['POST'])
def api_train():
    """Build the models of orders 1..max_order from posted text."""
    global models

    data = request.get_json(silent=True) or {}
    text = data.get('text', '')
    if not isinstance(text, str) or not text.strip():
        return _bad_request('No training text provided')

    language = Language.from_iso_code(str(data.get('language', 'en')))
    max_order = _parse_order(data.get('max_order'))

    trained = build_language_models(split_text_into_lines(text), language, max_order)

    with models_lock:
        models = {model.order: model for model in trained}

    return jsonify({
        'message': 'Training complete',
        'stats': [model.stats() for model in trained]
    })


@app.route('/api/model/info')
def api_model_info():
    """Get statistics of the trained models."""
    trained = _current_models()
    if not trained:
        return _bad_request('No model trained')

    return jsonify({
        'language': trained[0].language.iso_code,
        'max_order': trained[-1].order,
        'stats': [model.stats() for model in trained]
    })


@app.route('/api/frequencies')
def api_frequencies():
    """Get the most frequent n-grams of one order."""
    trained = _current_models()
    if not trained:
        return _bad_request('No model trained')

    order = _parse_order(request.args.get('order'), default=1)
    if order > len(trained):
        return _bad_request(f'No model of order {order} trained')

    k = max(0, min(request.args.get('k', 10, type=int), app.config['MAX_TOP_K']))
    model = trained[order - 1]

    return jsonify({
        'order': order,
        'ngrams': [
            {
                'ngram': ngram.value,
                'absolute': count,
                'relative': model.relative_frequencies[ngram]
            }
            for ngram, count in model.top_ngrams(k)
        ]
    })


@app.route('/api/test_model', methods=['POST'])
def api_test_model():
    """Get the back-off chains of a text for one order."""
    data = request.get_json(silent=True) or {}
    text = data.get('text', '')
    if not isinstance(text, str):
        return _bad_request('Text must be a string')

    order = _parse_order(data.get('order'))
    words = split_text_into_words(text)
    if data.get('language') is not None:
        language = Language.from_iso_code(str(data['language']))
        model = TestDataLanguageModel.from_words(words, order, language.alphabet)
    else:
        model = TestDataLanguageModel.from_words(words, order)

    return jsonify({
        'order': order,
        'chains': model.to_strings()
    })


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Language N-gram Model Inspection API')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args()

    print(f"\nStarting Language N-gram Model API on http://{args.host}:{args.port}\n")

    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
