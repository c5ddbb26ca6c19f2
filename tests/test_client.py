from unittest.mock import patch

import pytest
import requests

from claritypath.client import DEFAULT_REPORT, DiagnosisAPIError, generate_report, get_clarity_insights
from claritypath.diagnosis.fallback import FALLBACK_SUMMARY
from conftest import fake_response

ENTRY = {
    'id': 'abc',
    'prompt': 'p',
    'summary': 'Remote summary',
    'feelings': ['f'],
    'actionPlan': ['a'],
    'reflectionPrompts': ['r'],
    'createdAt': '2026-10-19T09:00:00.000Z',
}


@patch('claritypath.client.requests.post')
def test_in_process_when_no_api_url(mock_post, offline_config):
    data = get_clarity_insights('I feel lost', offline_config)

    mock_post.assert_not_called()
    assert data['prompt'] == 'I feel lost'
    assert data['summary'] == FALLBACK_SUMMARY
    assert 'actionPlan' in data


def test_report_in_process(offline_config):
    data = generate_report('I feel lost', offline_config)

    assert data['report'] == data['summary'] == FALLBACK_SUMMARY
    assert data['prompt'] == 'I feel lost'


@patch('claritypath.client.requests.post')
def test_remote_insights(mock_post, remote_config):
    mock_post.return_value = fake_response(payload=ENTRY)

    data = get_clarity_insights('p', remote_config)

    assert data == ENTRY
    args, kwargs = mock_post.call_args
    assert args[0] == 'https://clarity.example/api/diagnosis'
    assert kwargs['json'] == {'prompt': 'p'}


@patch('claritypath.client.requests.post')
def test_remote_report_adds_report_field(mock_post, remote_config):
    mock_post.return_value = fake_response(payload=ENTRY)

    data = generate_report('p', remote_config)

    assert data == {**ENTRY, 'report': 'Remote summary'}


@patch('claritypath.client.requests.post')
def test_report_uses_canned_sentence_without_summary(mock_post, remote_config):
    mock_post.return_value = fake_response(payload={**ENTRY, 'summary': ''})

    data = generate_report('p', remote_config)

    assert data['report'] == DEFAULT_REPORT


@patch('claritypath.client.requests.post')
def test_remote_error_is_raised_with_status_and_body(mock_post, remote_config):
    mock_post.return_value = fake_response(status_code=400, text='{"error":"Prompt is required"}')

    with pytest.raises(DiagnosisAPIError) as exc:
        generate_report('', remote_config)

    assert exc.value.status_code == 400
    assert exc.value.body == '{"error":"Prompt is required"}'
    assert str(exc.value) == 'Unable to generate report: 400 {"error":"Prompt is required"}'


@patch('claritypath.client.requests.post')
def test_remote_insights_error_message(mock_post, remote_config):
    mock_post.return_value = fake_response(status_code=500, text='boom')

    with pytest.raises(DiagnosisAPIError, match=r'API error \(500\): boom'):
        get_clarity_insights('p', remote_config)


@patch('claritypath.client.requests.post')
def test_transport_errors_propagate(mock_post, remote_config):
    mock_post.side_effect = requests.ConnectionError('down')

    with pytest.raises(requests.ConnectionError):
        get_clarity_insights('p', remote_config)
