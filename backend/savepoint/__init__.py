"""Save Point API: CRUD пройденных игр в памяти процесса."""
