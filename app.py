import os
import uuid
import logging
from datetime import datetime, timedelta
from flask import Flask, request, jsonify, send_file
from werkzeug.utils import secure_filename

from trialbalanceconverter.converter import TrialBalanceConverter, combine_results
from trialbalanceconverter.exceptions import ExtractionError

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['UPLOAD_FOLDER'] = os.environ.get('TBC_UPLOAD_FOLDER', 'uploads')
app.config['MAX_CONTENT_LENGTH'] = 100 * 1024 * 1024  # 100MB max file size
app.config['JOB_TTL'] = timedelta(hours=2)

# Jobs live in memory only
processing_jobs = {}

def cleanup_old_jobs():
  """Drop jobs older than JOB_TTL together with their files"""
  cutoff = datetime.now() - app.config['JOB_TTL']
  expired = [job_id for job_id, job in processing_jobs.items() if job['created_at'] < cutoff]

  for job_id in expired:
    job = processing_jobs.pop(job_id)
    paths = [f['path'] for f in job['files']]
    if job.get('output_file'):
      paths.append(job['output_file'])
    for path in paths:
      try:
        if os.path.exists(path):
          os.remove(path)
      except OSError as e:
        logger.warning(f"Could not remove {path}: {e}")

@app.route('/upload', methods=['POST'])
def upload_files():
  cleanup_old_jobs()

  if 'files' not in request.files:
    return jsonify({'success': False, 'error': 'No files uploaded'}), 400

  files = request.files.getlist('files')
  if not files or all(f.filename == '' for f in files):
    return jsonify({'success': False, 'error': 'No files selected'}), 400

  valid_files = [f for f in files if f and f.filename.lower().endswith('.pdf')]
  if not valid_files:
    return jsonify({'success': False, 'error': 'Please upload valid PDF files'}), 400

  job_id = str(uuid.uuid4())
  os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

  uploaded_files = []
  for file in valid_files:
    filename = secure_filename(file.filename)
    file_path = os.path.join(app.config['UPLOAD_FOLDER'], f"{job_id}_{filename}")
    file.save(file_path)
    uploaded_files.append({'path': file_path, 'original_name': file.filename})

  job = {
    'id': job_id,
    'status': 'processing',
    'files': uploaded_files,
    'created_at': datetime.now(),
    'documents': [],
    'errors': [],
  }
  processing_jobs[job_id] = job

  try:
    process_trial_balances(job)
  except Exception as e:
    logger.exception(f"Job {job_id} failed")
    job['status'] = 'error'
    job['error'] = str(e)
    return jsonify({'success': False, 'job_id': job_id, 'error': f'Processing failed: {str(e)}'}), 500

  return jsonify({
    'success': True,
    'job_id': job_id,
    'documents': job['documents'],
    'errors': job['errors'],
    'extracted_records': job['extracted_records'],
  })

def process_trial_balances(job):
  """Parse every uploaded file and write the combined CSV"""
  converter = TrialBalanceConverter()
  results = []

  for f in job['files']:
    try:
      data = converter.convert_single(f['path'])
    except ExtractionError as e:
      logger.error(f"Error processing {f['original_name']}: {e}")
      job['errors'].append({'file': f['original_name'], 'error': str(e)})
      continue

    results.append((f['original_name'], data))
    summary = data.to_dict()
    summary['file'] = f['original_name']
    summary['entry_count'] = len(data.ledger_entries)
    job['documents'].append(summary)

  combined = combine_results(results)
  output_file = os.path.join(app.config['UPLOAD_FOLDER'], f"{job['id']}_output.csv")
  combined.to_csv(output_file, index=False)

  job['output_file'] = output_file
  job['extracted_records'] = len(combined)
  job['status'] = 'completed'
  job['completed_at'] = datetime.now()

@app.route('/status/<job_id>')
def get_status(job_id):
  """Get processing status for a job"""
  job = processing_jobs.get(job_id)
  if not job:
    return jsonify({'success': False, 'error': 'Job not found'}), 404

  response_data = {
    'success': True,
    'job_id': job_id,
    'status': job['status'],
    'total_files': len(job['files']),
    'extracted_records': job.get('extracted_records', 0),
    'errors': job['errors'],
  }
  if job['status'] == 'error':
    response_data['error'] = job.get('error', 'Unknown error')

  return jsonify(response_data)

@app.route('/download/<job_id>')
def download_results(job_id):
  """Download CSV results for a completed job"""
  job = processing_jobs.get(job_id)
  if not job:
    return jsonify({'success': False, 'error': 'Job not found'}), 404

  if job['status'] != 'completed':
    return jsonify({'success': False, 'error': 'Job not completed'}), 400

  if not job.get('output_file') or not os.path.exists(job['output_file']):
    return jsonify({'success': False, 'error': 'Results file not found'}), 404

  timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
  download_name = f'trial_balance_{timestamp}_{job["extracted_records"]}records.csv'

  return send_file(
    os.path.abspath(job['output_file']),
    as_attachment=True,
    download_name=download_name,
    mimetype='text/csv'
  )

if __name__ == '__main__':
  logging.basicConfig(level=logging.INFO)
  app.run(debug=True, host='0.0.0.0', port=8080)
