import pytest
from mongo import *
from mongo import engine
from tests import utils
from tests.base_tester import BaseTester


class TestAddUsage(BaseTester):
    '''Test submissions sent by the extension
    '''

    def test_add(self, client):
        user_data = utils.user.user_data(ip='10.0.0.1', handle='tourist')
        code_info = utils.submission.code_info(
            status='Accepted',
            problem_name='Watermelon',
            problem_url='https://codeforces.com/problemset/problem/4/A',
            code_language='GNU G++17 7.3.0',
        )
        rv, rv_json, _ = BaseTester.request(
            client,
            'post',
            '/api/usage',
            json={
                'userData': user_data,
                'codeInfo': code_info,
            },
        )
        assert rv.status_code == 200, rv_json
        assert rv_json['message'] == 'Successfully saved'
        assert engine.User.objects.count() == 1
        submission = Submission.list_all()[0]
        assert submission.problem_name == 'Watermelon'
        assert submission.status == 'Accepted'
        assert submission.owner.handle == 'tourist'
        assert submission.owner.city == user_data['city']

    def test_add_from_same_ip_reuses_user(self, client):
        for handle in ('tourist', 'Petr'):
            rv = client.post(
                '/api/usage',
                json={
                    'userData':
                    utils.user.user_data(ip='10.0.0.2', handle=handle),
                    'codeInfo': utils.submission.code_info(),
                },
            )
            assert rv.status_code == 200, rv.get_json()
        assert engine.User.objects.count() == 1
        assert engine.Submission.objects.count() == 2
        # the first sight wins
        assert User.get_by_ip('10.0.0.2').handle == 'tourist'

    def test_add_from_different_ip(self, client):
        for ip in ('10.0.0.3', '10.0.0.4'):
            client.post(
                '/api/usage',
                json={
                    'userData': utils.user.user_data(ip=ip),
                    'codeInfo': utils.submission.code_info(),
                },
            )
        assert engine.User.objects.count() == 2

    @pytest.mark.parametrize('payload', [
        {},
        {
            'userData': {
                'ip': '10.0.0.5'
            }
        },
        {
            'codeInfo': {
                'problemUrl': 'https://codeforces.com/contest/1/problem/A'
            }
        },
        {
            'userData': {},
            'codeInfo': {},
        },
    ])
    def test_missing_fields(self, client, payload):
        rv = client.post('/api/usage', json=payload)
        assert rv.status_code == 400, rv.get_json()
        assert rv.get_json()['message'] == 'Missing required fields'
        assert engine.Submission.objects.count() == 0

    @pytest.mark.parametrize('body', [
        [1, 2],
        'userData',
        42,
    ])
    def test_body_is_not_an_object(self, client, body):
        rv = client.post('/api/usage', json=body)
        assert rv.status_code == 400, rv.get_json()
        assert rv.get_json()['message'] == 'Missing required fields'
        assert engine.Submission.objects.count() == 0

    def test_missing_ip(self, client):
        user_data = utils.user.user_data()
        del user_data['ip']
        rv = client.post(
            '/api/usage',
            json={
                'userData': user_data,
                'codeInfo': utils.submission.code_info(),
            },
        )
        assert rv.status_code == 400, rv.get_json()
        assert engine.User.objects.count() == 0

    def test_payload_not_object(self, client):
        rv = client.post(
            '/api/usage',
            json={
                'userData': 'me',
                'codeInfo': utils.submission.code_info(),
            },
        )
        assert rv.status_code == 400, rv.get_json()

    @pytest.mark.parametrize('drop', ['problemUrl', 'code', 'codeLanguage'])
    def test_missing_required_code_info(self, client, drop):
        code_info = utils.submission.code_info()
        del code_info[drop]
        rv = client.post(
            '/api/usage',
            json={
                'userData': utils.user.user_data(),
                'codeInfo': code_info,
            },
        )
        assert rv.status_code == 400, rv.get_json()
        assert rv.get_json()['message'] == 'Invalid data'
        assert engine.Submission.objects.count() == 0

    def test_status_and_name_are_optional(self, client):
        code_info = utils.submission.code_info()
        del code_info['status']
        rv = client.post(
            '/api/usage',
            json={
                'userData': utils.user.user_data(),
                'codeInfo': code_info,
            },
        )
        assert rv.status_code == 200, rv.get_json()
        submission = Submission.list_all()[0]
        assert submission.parsed_status == Submission.Status.UNKNOWN
        assert submission.problem_name is None


class TestGetUsage(BaseTester):
    '''Test listing recorded submissions
    '''

    def test_no_user(self, auth_client):
        rv, rv_json, _ = BaseTester.request(auth_client, 'get', '/api/usage')
        assert rv.status_code == 404, rv_json
        assert rv_json['message'] == 'No users found'

    def test_newest_first(self, auth_client):
        ids = [
            utils.submission.create_submission(
                created_at=utils.days_ago(n)).id for n in range(5)
        ]
        rv, rv_json, rv_data = BaseTester.request(
            auth_client,
            'get',
            '/api/usage',
        )
        assert rv.status_code == 200, rv_json
        assert [s['submissionId'] for s in rv_data] == ids
        created = [s['createdAt'] for s in rv_data]
        assert created == sorted(created, reverse=True)

    def test_serialized_fields(self, auth_client):
        user = utils.user.create_user(handle='tourist', city='Gomel')
        submission = utils.submission.create_submission(
            user=user,
            status='Wrong Answer',
            problem_name='Watermelon',
        )
        rv, rv_json, rv_data = BaseTester.request(
            auth_client,
            'get',
            '/api/usage',
        )
        assert rv.status_code == 200, rv_json
        s = rv_data[0]
        assert s['submissionId'] == submission.id
        assert s['status'] == 'Wrong Answer'
        assert s['problemName'] == 'Watermelon'
        assert s['display'] == {'short': 'WA', 'color': 'red', 'icon': 'x-circle'}
        assert s['user']['userId'] == 'tourist'
        assert s['user']['city'] == 'Gomel'
        assert s['user']['id'] == str(user.id)
        # source code is only served one by one
        assert 'code' not in s

    def test_filter_by_query_and_user(self, auth_client):
        utils.submission.create_submission(
            user='tourist',
            problem_name='AtCoder Beginner Contest',
        )
        utils.submission.create_submission(
            user='tourist',
            problem_name='Watermelon',
        )
        utils.submission.create_submission(
            user='Petr',
            problem_name='AtCoder Regular Contest',
        )
        rv = auth_client.get('/api/usage?q=atcoder')
        assert len(rv.get_json()['data']) == 2
        rv = auth_client.get('/api/usage?q=atcoder&user=tourist')
        data = rv.get_json()['data']
        assert [s['problemName'] for s in data] == ['AtCoder Beginner Contest']
        rv = auth_client.get('/api/usage?q=&user=all')
        assert len(rv.get_json()['data']) == 3

    def test_dangling_user(self, auth_client):
        keep = utils.submission.create_submission()
        gone = utils.submission.create_submission()
        gone.owner.delete()
        rv, rv_json, rv_data = BaseTester.request(
            auth_client,
            'get',
            '/api/usage',
        )
        assert rv.status_code == 200, rv_json
        users = {s['submissionId']: s['user'] for s in rv_data}
        assert users[gone.id] is None
        assert users[keep.id]['ip'] == keep.owner.ip
