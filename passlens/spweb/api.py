from flask import Flask, jsonify, request

from passlens.config import build_analyzer, load_config
from passlens.evaluator import PasswordAnalyzer

app = Flask(__name__)

_analyzer = None


def get_analyzer() -> PasswordAnalyzer:
    global _analyzer
    if _analyzer is None:
        _analyzer = build_analyzer(load_config())
    return _analyzer


@app.route('/')
def home():
    return jsonify({
        "message": "PassLens API is running"
    })


@app.route('/analyze', methods=['POST'])
def analyze_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'expected a JSON object'}), 400
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400

    try:
        analyzer = get_analyzer()
    except (ValueError, OSError) as e:
        return jsonify({'error': f'invalid server configuration: {e}'}), 500
    rate = data.get('guesses_per_second')
    if rate is not None:
        if isinstance(rate, bool):
            return jsonify({'error': 'guesses_per_second must be a number'}), 400
        try:
            analyzer = PasswordAnalyzer(analyzer.common_words, rate)
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

    report = analyzer.analyze(password)
    return jsonify(report.to_dict())


if __name__ == "__main__":
    app.run(debug=True)
