"""
Tests for service-wide endpoints, the 404 catch-all and request logging.
"""
import json
from datetime import datetime

from django.test import SimpleTestCase, override_settings


class HealthEndpointTest(SimpleTestCase):

    def test_health(self):
        response = self.client.get('/health')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['status'], 'OK')
        self.assertEqual(data['service'], 'todo-sorter')
        self.assertEqual(data['version'], '1.0.0')
        self.assertGreaterEqual(data['uptime'], 0)
        # Parses as an ISO-8601 timestamp
        datetime.fromisoformat(data['timestamp'].replace('Z', '+00:00'))


class ServiceInfoEndpointTest(SimpleTestCase):

    def test_service_info(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['service'], 'Todo Sorting Service')
        self.assertIn('POST /sort', data['endpoints'])
        self.assertEqual(
            data['supportedStrategies'],
            ['priority', 'dueDate', 'alphabetical', 'completion', 'createdAt'],
        )


class NotFoundTest(SimpleTestCase):

    def test_unknown_route(self):
        response = self.client.get('/todos/42')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {
            'error': 'Not Found',
            'message': 'Route GET /todos/42 not found',
            'availableEndpoints': ['POST /sort', 'GET /sort/strategies', 'GET /health', 'GET /'],
        })

    def test_unknown_route_any_method(self):
        response = self.client.delete('/nothing-here')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Route DELETE /nothing-here not found')

    def test_known_path_with_wrong_method(self):
        for method, path in (('get', '/sort'), ('post', '/health'), ('delete', '/sort/strategies')):
            response = getattr(self.client, method)(path)
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json()['message'], f'Route {method.upper()} {path} not found')
            self.assertIn('POST /sort', response.json()['availableEndpoints'])


class RequestLoggingMiddlewareTest(SimpleTestCase):

    def test_logs_request_and_response(self):
        with self.assertLogs('apps.core.middleware', level='INFO') as logs:
            self.client.get('/health')

        self.assertTrue(logs.output[0].endswith('GET /health - 127.0.0.1'))
        self.assertRegex(logs.output[-1], r'GET /health - 200 \(\d+ms\)$')

    @override_settings(REQUEST_LOG_BODY_LIMIT=20)
    def test_truncates_post_body(self):
        payload = {'todos': [{'title': 'x' * 50}], 'sortBy': 'alphabetical'}
        with self.assertLogs('apps.core.middleware', level='INFO') as logs:
            self.client.post('/sort', data=json.dumps(payload), content_type='application/json')

        body_lines = [line for line in logs.output if 'Body: ' in line]
        self.assertEqual(len(body_lines), 1)
        logged = body_lines[0].split('Body: ', 1)[1]
        self.assertEqual(logged, json.dumps(payload)[:20] + '...')
