import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models, schemas

logger = logging.getLogger(__name__)

def get_task(db: Session, task_id: int) -> Optional[models.Task]:
    return db.query(models.Task).filter(models.Task.id == task_id).first()

def get_tasks(db: Session) -> List[models.Task]:
    return db.query(models.Task).order_by(models.Task.created_at.desc(), models.Task.id.desc()).all()

def create_task(db: Session, task_in: schemas.TaskCreate) -> models.Task:
    task = models.Task(**task_in.model_dump(mode="json"))
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task created id=%s status=%s", task.id, task.status)
    return task

def update_task(db: Session, db_task: models.Task, task_in: schemas.TaskUpdate) -> models.Task:
    data = task_in.model_dump(mode="json", exclude_unset=True)
    for field, value in data.items():
        setattr(db_task, field, value)
    db.commit()
    db.refresh(db_task)
    logger.info("Task updated id=%s fields=%s", db_task.id, sorted(data))
    return db_task

def delete_task(db: Session, db_task: models.Task) -> None:
    task_id = db_task.id
    db.delete(db_task)
    db.commit()
    logger.info("Task deleted id=%s", task_id)
