# -*- coding: utf-8 -*-
"""
Centralized task management system for non-blocking bot operations
"""
import asyncio
import functools
from typing import Set, Callable, Coroutine, Any

from loguru import logger

from mybot.services.translation_service import TRANSPORT_FAILURE_ANSWER

# Global task registry for all bot operations
_active_tasks: Set[asyncio.Task] = set()


async def cleanup_completed_tasks():
    """Clean up completed tasks from the active tasks set"""
    completed_tasks = [task for task in _active_tasks if task.done()]
    for task in completed_tasks:
        _active_tasks.discard(task)
        # Log any exceptions that occurred in background tasks
        if not task.cancelled() and task.exception():
            logger.error(f"Background task failed: {task.exception()}")


def fire_and_forget(coro: Coroutine[Any, Any, Any], name: str = "unknown") -> asyncio.Task:
    """
    Schedule a best-effort coroutine without awaiting it.

    The task is kept in the registry until it finishes; its failures are logged and dropped.
    """
    task = asyncio.create_task(coro, name=name)
    _active_tasks.add(task)

    def _done(t: asyncio.Task):
        _active_tasks.discard(t)
        if not t.cancelled() and t.exception():
            logger.debug(f"Best-effort task {name} failed: {t.exception()}")

    task.add_done_callback(_done)
    return task


def non_blocking_handler(handler_name: str = "unknown"):
    """
    Decorator to make any bot handler non-blocking by running it as a background task.

    Args:
        handler_name: Name of the handler for logging purposes

    Usage:
        @non_blocking_handler("handle_message")
        async def handle_message(update, context):
            # This will run in background without blocking other handlers
            pass
    """

    def decorator(handler_func: Callable):
        @functools.wraps(handler_func)
        async def wrapper(update, context):
            await cleanup_completed_tasks()

            task = asyncio.create_task(
                _execute_handler_task(handler_func, update, context, handler_name)
            )

            # Add task to set to prevent garbage collection
            _active_tasks.add(task)

            logger.debug(
                f"Started non-blocking {handler_name} task (Active tasks: {len(_active_tasks)})"
            )
            return task

        return wrapper

    return decorator


async def _execute_handler_task(handler_func: Callable, update, context, handler_name: str):
    """Execute handler function as a background task with proper cleanup"""
    current_task = asyncio.current_task()
    try:
        await handler_func(update, context)
        logger.debug(f"Completed {handler_name} task")

    except Exception as e:
        logger.exception(f"Error in {handler_name} handler: {e}")

        # Try to send error message to user if possible
        try:
            if update and update.effective_chat:
                await context.bot.send_message(
                    chat_id=update.effective_chat.id, text=TRANSPORT_FAILURE_ANSWER
                )
        except Exception as send_err:
            logger.error(f"Failed to report {handler_name} error to chat: {send_err}")

    finally:
        # Ensure task is removed from active set when done
        if current_task:
            _active_tasks.discard(current_task)


async def wait_for_all_tasks(timeout: float = 30.0) -> bool:
    """
    Wait for all active tasks to complete, with timeout.
    Useful for graceful shutdown.

    Returns:
        True if all tasks completed, False if timeout occurred
    """
    loop = asyncio.get_running_loop()
    pending = [t for t in _active_tasks if not t.done() and t.get_loop() is loop]
    if not pending:
        return True

    logger.info(f"Waiting for {len(pending)} active tasks to complete...")

    try:
        await asyncio.wait_for(asyncio.gather(*pending, return_exceptions=True), timeout=timeout)
        logger.info("All tasks completed successfully")
        return True

    except asyncio.TimeoutError:
        logger.warning(
            f"Timeout waiting for tasks to complete, {len(_active_tasks)} tasks still running"
        )
        return False
