"""
Core: ошибки, модель дроби и арифметика дробей.

Модуль не зависит от внешних коллабораторов (ввод/вывод, коллекции).
"""
