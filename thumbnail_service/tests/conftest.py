import boto3
import pytest
from moto import mock_aws

from thumbnail_service.tests.testutils import TEST_REGION
from thumbnail_service.tests.testutils import TEST_SOURCE_BUCKET
from thumbnail_service.tests.testutils import TEST_THUMBNAIL_BUCKET


@pytest.fixture
def aws_credentials(monkeypatch):
    """ Fake credentials so boto3 never reaches a real account. """
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', TEST_REGION)


@pytest.fixture
def s3(aws_credentials):
    with mock_aws():
        s3_client = boto3.client('s3', region_name=TEST_REGION)
        s3_client.create_bucket(Bucket=TEST_SOURCE_BUCKET)
        s3_client.create_bucket(Bucket=TEST_THUMBNAIL_BUCKET)
        yield s3_client


@pytest.fixture
def thumbnail_env(monkeypatch):
    monkeypatch.setenv('SOURCE_BUCKET', TEST_SOURCE_BUCKET)
    monkeypatch.setenv('THUMBNAIL_BUCKET', TEST_THUMBNAIL_BUCKET)
    monkeypatch.setenv('THUMBNAIL_SUFFIX', '-thumbnail')
    monkeypatch.setenv('DEST_KEY_POLICY', 'suffix')
    monkeypatch.setenv('THUMBNAIL_MAX_WIDTH', '200')
    monkeypatch.setenv('THUMBNAIL_MAX_HEIGHT', '200')
    monkeypatch.setenv('REGION', TEST_REGION)
