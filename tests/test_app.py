import io
import os
import shutil
import tempfile
import unittest
from datetime import datetime, timedelta

from fpdf import FPDF

import app as webapp


def make_pdf_bytes():
  pdf = FPDF()
  pdf.set_font('Helvetica', size=10)
  pdf.add_page()
  for line in ['01.01.2024 - 31.03.2024', 'ACME LTD', 'HESAP KODU AÇIKLAMA BORÇ',
               '100 KASA 1.250,00 0,00 1.250,00 0,00']:
    pdf.cell(0, 8, line, new_x='LMARGIN', new_y='NEXT')
  return bytes(pdf.output())


class AppTest(unittest.TestCase):
  def setUp(self):
    self.upload_dir = tempfile.mkdtemp()
    webapp.app.config['UPLOAD_FOLDER'] = self.upload_dir
    webapp.app.config['TESTING'] = True
    webapp.processing_jobs.clear()
    self.client = webapp.app.test_client()

  def tearDown(self):
    shutil.rmtree(self.upload_dir, ignore_errors=True)

  def _upload(self, name='mizan.pdf', payload=None):
    payload = payload if payload is not None else make_pdf_bytes()
    return self.client.post('/upload', data={'files': (io.BytesIO(payload), name)},
                            content_type='multipart/form-data')

  def test_upload_status_download(self):
    response = self._upload()
    self.assertEqual(response.status_code, 200)
    body = response.get_json()
    self.assertTrue(body['success'])
    self.assertEqual(body['extracted_records'], 1)
    self.assertEqual(body['documents'][0]['customer_name'], 'ACME LTD')

    status = self.client.get(f"/status/{body['job_id']}").get_json()
    self.assertEqual(status['status'], 'completed')

    download = self.client.get(f"/download/{body['job_id']}")
    self.assertEqual(download.status_code, 200)
    self.assertIn(b'1.250,00', download.data)
    download.close()

  def test_rejects_non_pdf(self):
    response = self._upload(name='notes.txt', payload=b'hello')
    self.assertEqual(response.status_code, 400)

  def test_missing_files_field(self):
    response = self.client.post('/upload', data={}, content_type='multipart/form-data')
    self.assertEqual(response.status_code, 400)

  def test_unreadable_pdf_is_reported(self):
    body = self._upload(name='broken.pdf', payload=b'not a pdf').get_json()
    self.assertTrue(body['success'])
    self.assertEqual(body['extracted_records'], 0)
    self.assertEqual(body['errors'][0]['file'], 'broken.pdf')

  def test_app_needs_no_session_secret(self):
    self.assertIsNone(webapp.app.config['SECRET_KEY'])

  def test_unknown_job(self):
    self.assertEqual(self.client.get('/status/nope').status_code, 404)
    self.assertEqual(self.client.get('/download/nope').status_code, 404)

  def test_cleanup_old_jobs(self):
    body = self._upload().get_json()
    job = webapp.processing_jobs[body['job_id']]
    job['created_at'] = datetime.now() - timedelta(hours=3)
    webapp.cleanup_old_jobs()
    self.assertNotIn(body['job_id'], webapp.processing_jobs)
    self.assertFalse(os.path.exists(job['output_file']))


if __name__ == '__main__':
  unittest.main()
