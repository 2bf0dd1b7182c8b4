"""
Tests for the passport MRZ FastAPI application.
"""
from conftest import LINE1, LINE2, mutate


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_returns_ok(self, client):
        """Test /health returns OK status."""
        response = client.get('/health')
        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_root_lists_endpoints(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert 'parse' in response.json()['endpoints']


class TestParseEndpoint:
    """Test MRZ parse endpoint."""

    def test_parse_lines(self, client, sample_mrz_td3):
        response = client.post('/parse', json={'mrz_lines': sample_mrz_td3})
        assert response.status_code == 200
        data = response.json()
        assert data['success'] is True
        assert data['mrz_text'] == LINE1 + LINE2
        assert data['document'] == {
            'type': 'passport',
            'issuing_country': 'UTO',
            'primary_identifier': 'ERIKSSON',
            'secondary_identifier': 'ANNA MARIA',
            'document_number': 'L898902C3',
            'nationality': 'UTO',
            'date_of_birth': '1974-08-12',
            'sex': 'F',
            'date_of_expiry': '2012-04-15',
            'personal_number': 'ZE184226B<<<<<',
        }

    def test_parse_text_with_newline(self, client):
        response = client.post('/parse', json={'mrz_text': f"{LINE1}\n{LINE2}"})
        assert response.status_code == 200
        assert response.json()['document']['document_number'] == 'L898902C3'

    def test_checksum_failure_returns_422(self, client, mrz_text):
        response = client.post('/parse', json={'mrz_text': mutate(mrz_text, 64, '3')})
        assert response.status_code == 422
        data = response.json()
        assert data['success'] is False
        assert data['error_code'] == 'CHECKSUM_ERROR'
        assert data['details']['field'] == 'date_of_birth'

    def test_parse_error_returns_422(self, client, mrz_text):
        response = client.post('/parse', json={'mrz_text': mutate(mrz_text, 1, 'V')})
        assert response.status_code == 422
        assert response.json()['error_code'] == 'PARSE_ERROR'

    def test_invalid_character_returns_422(self, client, mrz_text):
        response = client.post('/parse', json={'mrz_text': mutate(mrz_text, 46, 'x')})
        assert response.status_code == 422
        data = response.json()
        assert data['error_code'] == 'INVALID_CHARACTER'
        assert data['details']['position'] == 2

    def test_requires_one_source(self, client, sample_mrz_td3):
        assert client.post('/parse', json={}).status_code == 422
        response = client.post('/parse', json={
            'mrz_text': LINE1 + LINE2,
            'mrz_lines': sample_mrz_td3,
        })
        assert response.status_code == 422

    def test_unsupported_document_type(self, client, sample_mrz_td3):
        response = client.post('/parse', json={
            'mrz_lines': sample_mrz_td3,
            'documents_type': 'visa',
        })
        assert response.status_code == 422


class TestCheckDigitEndpoint:
    """Test check digit endpoint."""

    def test_icao_example(self, client):
        response = client.post('/check-digit', json={'data': 'L898902C3'})
        assert response.status_code == 200
        assert response.json() == {'data': 'L898902C3', 'check_digit': 6}

    def test_invalid_character(self, client):
        response = client.post('/check-digit', json={'data': 'AB#'})
        assert response.status_code == 422
        assert response.json()['details']['position'] == 3
